"""Free-function form of `Maybe.match` and `Outcome.match`."""
from typing import Any, Union, TypeVar, Callable

from e2fyi.containers.maybe import Maybe
from e2fyi.containers.outcome import Outcome

R = TypeVar("R")


def match(container: Union[Maybe, Outcome], **handlers: Callable[..., R]) -> R:
    """
    Dispatches on the state of `container` and returns the result of the single
    handler that was called. Handlers are `present`/`absent` for a `Maybe` and
    `success`/`failure` for an `Outcome`, exactly as for the `match` methods.

    Example::

        from e2fyi.containers import Maybe, match

        describe = match(
            find_user(user_id),
            present=lambda user: match(
                Maybe.from_nullable(user.email),
                present=lambda email: "%s <%s>" % (user.name, email),
                absent=lambda: "%s (no email)" % user.name,
            ),
            absent=lambda: "User not found",
        )

    Handlers kept in a mapping can be splatted in::

        handlers = {"success": str, "failure": lambda err: "error: %s" % err}
        match(outcome, **handlers)

    Raises:
        TypeError: if `container` is neither a `Maybe` nor an `Outcome`, or if the
            handlers do not match the container kind.
    """
    if not isinstance(container, (Maybe, Outcome)):
        raise TypeError(
            "Expected a Maybe or an Outcome, got %s." % type(container).__name__
        )
    method: Callable[..., Any] = container.match
    return method(**handlers)
