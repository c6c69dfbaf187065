class TFCExecutorException(Exception):
    pass


class APIException(TFCExecutorException):
    def __init__(self, message: str, response=None):
        super().__init__(message)
        self.response = response


class TFCObjectException(TFCExecutorException):
    pass


class UnmanagedObjectTypeException(TFCObjectException):
    pass


class InvalidVariableKeyException(TFCExecutorException):
    pass
