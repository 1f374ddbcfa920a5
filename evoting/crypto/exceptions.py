"""
Custom Exceptions for the e-voting crypto layer.

11-04-2023
"""


class EVotingError(Exception):
    """Base class for e-voting exceptions"""
    pass


class RandomnessFailure(EVotingError):
    """
    Exception raised when the randomness source fails or
    returns fewer bytes than requested.
    """
    pass


class MalformedEncoding(EVotingError):
    """
    Exception raised when a binary or JSON encoding has the wrong
    length, trailing data or the wrong shape.

    Attributes:
        type_name -- name of the type being decoded
        message -- explanation of the error
    """

    def __init__(self, type_name, message):
        self.type_name = type_name
        self.message = message
        super().__init__(f"{type_name}: {message}")


class FieldRangeError(EVotingError):
    """Exception raised when a scalar or challenge is out of range"""
    pass


class InvalidGroupElement(EVotingError):
    """Exception raised when a point is not on the curve"""
    pass


class ProofInvalid(EVotingError):
    """
    Exception raised when a zero-knowledge proof does not verify.

    Attributes:
        proof_name -- name of the proof being verified
        reason -- which check failed
    """

    def __init__(self, proof_name, reason="challenge mismatch"):
        self.proof_name = proof_name
        self.reason = reason
        super().__init__(f"{proof_name} verification failed: {reason}")


class UnsupportedPlaintext(EVotingError):
    """Exception raised when a vote outside {0, 1} is submitted for proving"""

    def __init__(self, vote):
        self.vote = vote
        super().__init__(f"vote {vote} is not provable, expected 0 or 1")


class DecodeFailed(EVotingError):
    """
    Exception raised when the baby-step giant-step search is exhausted.

    Attributes:
        bound -- upper bound supplied by the caller
    """

    def __init__(self, bound):
        self.bound = bound
        super().__init__(f"discrete log not found within bound {bound}")


class WrongElectionStatus(EVotingError):
    """Exception raised when an election transition is called in the wrong status"""

    def __init__(self, operation, status):
        self.operation = operation
        self.status = status
        super().__init__(f"{operation} not allowed in status '{status.value}'")


class CapabilityError(EVotingError):
    """Exception raised by the capability service"""
    pass
