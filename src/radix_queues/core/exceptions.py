class EmptyContainerError(IndexError):
    """Levantada ao remover/consultar o início de uma fila vazia.

    Herda de IndexError para manter compatibilidade com código que já
    trata o erro padrão de containers vazios do Python.
    """
    pass
