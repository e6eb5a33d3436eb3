from functools import wraps


def raise_as(exception_type: type[Exception], message: str, catch: tuple[type[Exception], ...] = (Exception,)):
    """Helper decorator that replaces the given low-level errors raised by the
    decorated function with `exception_type`, carrying a more helpful message.

    Args:
        exception_type (type[Exception]): exception class raised instead
        message (str): prefix of the new exception's message
        catch (tuple[type[Exception], ...], optional): errors to replace. Defaults to any `Exception`.
    """

    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except exception_type:
                raise
            except catch as e:
                raise exception_type(f"{message}: {e}") from e

        return wrapper

    return decorator
