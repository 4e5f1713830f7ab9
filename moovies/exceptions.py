"""Domain errors raised by the stores and turned into HTTP responses by the API layer."""

CATEGORY_NOT_FOUND = "Categoria não encontrada"
MOVIE_NOT_FOUND = "Filme não encontrado"


class NotFoundError(Exception):
    """A requested or referenced row does not exist."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
