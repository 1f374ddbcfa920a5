"""
Capabilities offered by the e-voting cryptographic service.

Arguments and results are JSON documents carried as bytes.

09-05-2023
"""

import json
import logging

from Crypto.Random import get_random_bytes

from evoting.config import MAX_TALLY_BOUND
from evoting.crypto.arith import CurvePoint
from evoting.crypto.elgamal import EncryptedVote, KeyPair
from evoting.crypto.exceptions import CapabilityError, MalformedEncoding
from evoting.crypto.protocol import decrypt_tally_with_proof, encrypt_vote_with_proof, new_key_pair_with_proof
from evoting.serialization import load_json

logger = logging.getLogger(__name__)

NEW_KEY_PAIR_WITH_PROOF_ID = "924e949e-0f98-42c6-a4ff-bb2b1c8693e0"
ENCRYPT_VOTE_WITH_PROOF_ID = "772e6272-8c49-463f-b2d1-92088ae06da1"
DECRYPT_TALLY_WITH_PROOF_ID = "c238d864-ae22-4db5-b3d1-83c41cb8b4dd"


def _to_bytes(data) -> bytes:
    return json.dumps(data).encode("utf-8")


def _load_int(argument: bytes, name: str) -> int:
    value = load_json(argument, name)
    if not isinstance(value, int) or isinstance(value, bool):
        raise MalformedEncoding(name, "expected an integer")
    return value


class Capability(object):
    """
    Base class for capabilities. Subclasses set the descriptive
    attributes and implement ``_compute``.
    """

    id: str = None
    name: str = None
    description: str = None
    num_arguments: int = 0

    def __init__(self, randfunc=get_random_bytes) -> None:
        self.randfunc = randfunc

    def info(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "num_arguments": self.num_arguments,
        }

    def compute(self, arguments: list) -> list:
        if len(arguments) != self.num_arguments:
            raise CapabilityError(
                f"{len(arguments)} arguments provided, but capability requires {self.num_arguments} arguments"
            )
        return self._compute(arguments)

    def _compute(self, arguments: list) -> list:
        raise NotImplementedError


class NewKeyPairWithProofCapability(Capability):
    id = NEW_KEY_PAIR_WITH_PROOF_ID
    name = "new_key_pair_with_proof"
    description = "generate ElGamal keypair and proof of sk knowledge"
    num_arguments = 0

    def _compute(self, arguments):
        key_pair, proof = new_key_pair_with_proof(self.randfunc)
        return [_to_bytes(key_pair.to_json()), _to_bytes(proof.to_json())]


class EncryptVoteWithProofCapability(Capability):
    id = ENCRYPT_VOTE_WITH_PROOF_ID
    name = "encrypt_vote_with_proof"
    description = "encrypt a vote and generate proof of correct encryption"
    num_arguments = 2

    def _compute(self, arguments):
        vote = _load_int(arguments[0], "vote")
        pk = CurvePoint.deserialize(arguments[1])

        encrypted_vote, proof = encrypt_vote_with_proof(self.randfunc, vote, pk)
        return [_to_bytes(encrypted_vote.to_json()), _to_bytes(proof.to_json())]


class DecryptTallyWithProofCapability(Capability):
    id = DECRYPT_TALLY_WITH_PROOF_ID
    name = "decrypt_tally_with_proof"
    description = "decrypt an encrypted tally and generate proof of correct decryption"
    num_arguments = 3

    def _compute(self, arguments):
        encrypted_tally = EncryptedVote.deserialize(arguments[0])
        n = _load_int(arguments[1], "n")
        key_pair = KeyPair.deserialize(arguments[2])

        if not 0 <= n <= MAX_TALLY_BOUND:
            raise CapabilityError(f"tally bound must be between 0 and {MAX_TALLY_BOUND}, got {n}")

        result, proof = decrypt_tally_with_proof(self.randfunc, encrypted_tally, n, key_pair)
        return [_to_bytes(result), _to_bytes(proof.to_json())]


CAPABILITY_CLASSES = [
    NewKeyPairWithProofCapability,
    EncryptVoteWithProofCapability,
    DecryptTallyWithProofCapability,
]
