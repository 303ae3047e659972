class ErrosDeValidacao(Exception):
    """
    Raised when a request body fails validation.
    Rendered as 400 with body {"mensagens": [...]}.
    """

    def __init__(self, mensagens: list[str]):
        super().__init__("; ".join(mensagens))
        self.mensagens = list(mensagens)
