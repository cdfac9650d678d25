"""Error taxonomy for the Cinder evaluator.

Every error is raised at the point of violation and aborts the run; the
interpreted language has no way to catch them. Only the driver's
`run_program` turns them into a diagnostic.
"""


class CinderError(Exception):
    """ Base class for all Cinder errors"""

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class DuplicateBinding(CinderError):
    """ Raised when a name is added twice to the same frame"""


class UnboundName(CinderError):
    """ Raised when a name cannot be found in any eligible frame"""


class ImmutableGlobal(CinderError):
    """ Raised when a global binding is the target of a change"""


class NotCallable(CinderError):
    """ Raised when the callee of a call has no call semantics"""


class ArityMismatch(CinderError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class EntryPointError(CinderError):
    """ Raised when the entry point is unbound or is not a Function"""


class NotACell(CinderError):
    """ Raised when an in-place change targets a value that is not a Cell"""


class CallDepthExceeded(CinderError):
    """ Raised when function calls nest deeper than the configured limit"""


class ReturnOutsideFunction(CinderError):
    """ Raised when a return statement runs outside a function call"""


class ProgramStateError(CinderError):
    """ Raised when a program is run more than once"""
