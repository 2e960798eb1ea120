"""
Graph configuration.

Holds the switches that control development-time behaviour of graph instances.
Nothing here changes the observable result of any graph operation.
"""


class GraphConfig:
    """
    Configuration for a graph instance.

    This class defines parameters for controlling graph bookkeeping:
    - Whether representation invariants are checked after each mutation
    - Whether mutations are reported to the module logger

    Attributes:
        check_rep: Run representation invariant checks after every mutation.
            Defaults to ``__debug__``, so running Python with ``-O`` turns the
            checks off.
        log_mutations: Emit a DEBUG log record for every mutation
    """

    def __init__(
        self,
        check_rep: bool = __debug__,
        log_mutations: bool = True,
    ):
        self.check_rep = check_rep
        self.log_mutations = log_mutations

    def __repr__(self) -> str:
        return f"GraphConfig(check_rep={self.check_rep}, log_mutations={self.log_mutations})"
