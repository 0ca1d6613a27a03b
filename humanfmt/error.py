class FormattingError(ValueError):
    def __init__(self, msg: str, value: str = None):
        self.value = value
        super().__init__(msg)


class InvalidFormat(FormattingError):
    def __init__(self, value: str, reason: str = None):
        msg = f'Unrecognized format: {value!r}'
        if reason:
            msg += f' ({reason})'
        super().__init__(msg, value)


class InvalidSuffix(InvalidFormat):
    def __init__(self, value: str, suffix: str):
        self.suffix = suffix
        super().__init__(value, f'unknown suffix {suffix!r}')


class InvalidUnit(FormattingError):
    def __init__(self, value: str, unit: str):
        self.unit = unit
        super().__init__(f'Invalid time unit {unit!r} in {value!r}', value)
