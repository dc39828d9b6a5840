class BaseException(Exception):
    def __init__(self, msg : str, *args) -> None:
        super().__init__(*args)
        self.message = msg
        return

    def __str__(self) -> str:
        return self.message
    pass

class InvalidConfiguration(BaseException):

    def __init__(self, setting : str, value, constraint : str, *args) -> None:
        super().__init__(
            'Invalid value %r for [%s], must be %s'%(value, setting, constraint),
            *args
        )
        self.setting = setting
        self.value = value
        return
    pass

__all__ = [
    'BaseException',
    'InvalidConfiguration',
]
