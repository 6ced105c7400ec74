class IncorrectParametersException(Exception):
    def __init__(self, message):
        super().__init__(message)


class WorkerFailureException(Exception):
    def __init__(self, message, chunk_index=None):
        super().__init__(message)
        self.chunk_index = chunk_index


class MergeRangeException(Exception):
    def __init__(self, message):
        super().__init__(message)
