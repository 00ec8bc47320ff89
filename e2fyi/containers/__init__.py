"""
Containers to make absent values and failed operations explicit in the type of a
function's result.


Optional values with `Maybe`::

    from e2fyi.containers import Maybe

    USERS = {1: {"name": "alice", "email": "alice@example.com"}, 2: {"name": "bob"}}


    def find_user(user_id: int) -> Maybe[dict]:
        return Maybe.from_nullable(USERS.get(user_id))


    email = find_user(2).flat_map(lambda u: Maybe.from_nullable(u.get("email")))
    print(email.unwrap_or("no email"))  # prints "no email"


Operations that can fail with `Outcome`::

    import json
    import logging

    from e2fyi.containers import Outcome

    data = Outcome.from_throwable(lambda: json.loads(raw_text))

    # print with a default value fallback
    print(data.unwrap_or({}))

    # print data if ok, else log exception
    if data.is_success():
        print(data.unwrap())
    else:
        logging.error("Unable to parse: %s", data.unwrap_err())


Aggregating outcomes::

    from e2fyi.containers import Outcome, success, failure

    Outcome.combine([success(1), success(2)])       # Success([1, 2])
    Outcome.combine([success(1), failure("oops")])  # Failure('oops')
"""
from e2fyi.containers.maybe import (
    UNDEFINED,
    Maybe,
    Absent,
    Present,
    Undefined,
    absent,
    present,
)
from e2fyi.containers.errors import (
    ContainerError,
    UnwrapFailureError,
    UnwrapSuccessError,
    EmptyContainerError,
)
from e2fyi.containers.outcome import Outcome, Failure, Success, failure, success
from e2fyi.containers.matching import match
