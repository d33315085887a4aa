"""Exceptions raised by the search engine."""


class MCTSError(Exception):
    """Base class for every error the engine raises."""


class TerminalStateError(MCTSError):
    """The root (or a node asked to expand) is already terminal."""


class IllegalActionError(MCTSError):
    """``renew`` was given an action that is not legal at the root."""


class EmptyActionSetError(MCTSError):
    """A non-terminal state reported no legal actions.

    The game model violates its contract; the engine cannot recover.
    """


class NoChildrenError(MCTSError):
    """The root has no children to choose an action from."""
