"""
Protocol operations of a yes/no election: each one bundles an action
with the zero-knowledge proof that goes with it.

02-05-2023
"""

import logging

from evoting.crypto.arith import CurvePoint
from evoting.crypto.elgamal import EncryptedVote, KeyPair, Vote, add_encrypted_votes, encrypt
from evoting.crypto.exceptions import UnsupportedPlaintext
from evoting.crypto.proofs import (
    ProofOfCorrectDecryption,
    ProofOfSkKnowledge,
    ProofOfVoteWellFormedness,
    prove_correct_decryption,
    prove_sk_knowledge,
    prove_vote_well_formedness,
)

logger = logging.getLogger(__name__)

__all__ = [
    "add_encrypted_votes",
    "decrypt_tally_with_proof",
    "encrypt_vote_with_proof",
    "new_key_pair_with_proof",
]


def new_key_pair_with_proof(randfunc):
    """
    Generates an election key pair and the proof that its owner
    knows the secret key.
    """
    key_pair = KeyPair.generate(randfunc)
    proof: ProofOfSkKnowledge = prove_sk_knowledge(randfunc, key_pair.pk, key_pair.sk)
    return key_pair, proof


def encrypt_vote_with_proof(randfunc, vote: int, pk: CurvePoint):
    """
    Encrypts a 0/1 vote under pk and proves the ciphertext well-formed.
    """
    if vote not in (Vote.NO, Vote.YES):
        raise UnsupportedPlaintext(vote)

    encrypted_vote, r = encrypt(randfunc, vote, pk)
    proof: ProofOfVoteWellFormedness = prove_vote_well_formedness(randfunc, vote, encrypted_vote, r, pk)
    return encrypted_vote, proof


def decrypt_tally_with_proof(randfunc, encrypted_tally: EncryptedVote, n: int, key_pair: KeyPair):
    """
    Decrypts a tally ciphertext, n being an upper bound on the result,
    and proves the decryption correct.
    """
    result = encrypted_tally.decrypt(key_pair.sk, n)
    proof: ProofOfCorrectDecryption = prove_correct_decryption(randfunc, encrypted_tally, key_pair)
    logger.debug("tally decrypted with bound %d", n)
    return result, proof
