class AuthorConstraintError(Exception):
    """
    Raised when deleting an author would leave one of their papers with no
    author at all. Nothing is deleted when this is raised.
    """

    def __init__(self, author_id: int, paper_ids=None):
        self.author_id = author_id
        self.paper_ids = list(paper_ids or [])
        super().__init__(
            "Cannot delete author: they are the only author of one or more papers"
        )
