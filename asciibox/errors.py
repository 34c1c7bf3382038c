class BoxError(Exception):
    pass


class InvalidDimension(BoxError):
    pass


class InvalidAlignment(BoxError):
    pass


class MalformedAnnotation(BoxError):
    pass


class ConfigurationError(BoxError):
    pass
