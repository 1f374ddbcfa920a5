"""
Test data for the election smart contract.

Two authorities A and B declare keys; five well-formed votes are cast
under A and two under B (which the contract for A must reject). The
tally of A's votes comes with a valid decryption proof, and with an
invalid one computed after an extra vote was added.

12-05-2023
"""

import json
import logging

from evoting.crypto.elgamal import ListOfEncryptedVotes, Vote
from evoting.crypto.proofs import prove_correct_decryption, verify_correct_decryption
from evoting.crypto.proofs.well_formedness import ListOfProofsOfVoteWellFormedness
from evoting.crypto.protocol import encrypt_vote_with_proof, new_key_pair_with_proof
from evoting.crypto.tally.tally import EncryptedTally

logger = logging.getLogger(__name__)

VALID_VOTES = [Vote.YES, Vote.NO, Vote.YES, Vote.YES, Vote.NO]
INVALID_VOTES = [Vote.YES, Vote.NO]


def _cast(randfunc, votes, pk):
    encrypted_votes = ListOfEncryptedVotes()
    proofs = ListOfProofsOfVoteWellFormedness()
    for vote in votes:
        encrypted_vote, proof = encrypt_vote_with_proof(randfunc, vote, pk)
        encrypted_votes.instances.append(encrypted_vote)
        proofs.instances.append(proof)
    return encrypted_votes, proofs


def generate_test_data(randfunc) -> dict:
    key_pair_a, proof_sk_knowledge_a = new_key_pair_with_proof(randfunc)
    key_pair_b, proof_sk_knowledge_b = new_key_pair_with_proof(randfunc)

    encrypted_votes_valid, proofs_valid = _cast(randfunc, VALID_VOTES, key_pair_a.pk)
    encrypted_votes_invalid, proofs_invalid = _cast(randfunc, INVALID_VOTES, key_pair_b.pk)

    encrypted_tally = EncryptedTally()
    for encrypted_vote in encrypted_votes_valid:
        encrypted_tally = encrypted_tally.add(encrypted_vote)

    result = encrypted_tally.decrypt(key_pair_a.sk).num_yes
    proof_correct_decryption_valid = prove_correct_decryption(randfunc, encrypted_tally.votes, key_pair_a)
    verify_correct_decryption(proof_correct_decryption_valid, encrypted_tally.votes, result, key_pair_a.pk)

    additional_vote, _ = encrypt_vote_with_proof(randfunc, Vote.NO, key_pair_a.pk)
    encrypted_tally = encrypted_tally.add(additional_vote)
    proof_correct_decryption_invalid = prove_correct_decryption(randfunc, encrypted_tally.votes, key_pair_a)

    logger.info("generated test data for %d valid and %d invalid votes", len(VALID_VOTES), len(INVALID_VOTES))
    return {
        "pk_a": key_pair_a.pk.to_json(),
        "proof_sk_knowledge_a": proof_sk_knowledge_a.to_json(),
        "pk_b": key_pair_b.pk.to_json(),
        "proof_sk_knowledge_b": proof_sk_knowledge_b.to_json(),
        "encrypted_votes_valid": ListOfEncryptedVotes.serialize(encrypted_votes_valid, to_dict=True),
        "proofs_vote_well_formedness_valid": ListOfProofsOfVoteWellFormedness.serialize(proofs_valid, to_dict=True),
        "encrypted_votes_invalid": ListOfEncryptedVotes.serialize(encrypted_votes_invalid, to_dict=True),
        "proofs_vote_well_formedness_invalid": ListOfProofsOfVoteWellFormedness.serialize(proofs_invalid, to_dict=True),
        "proof_correct_decryption_valid": proof_correct_decryption_valid.to_json(),
        "proof_correct_decryption_invalid": proof_correct_decryption_invalid.to_json(),
        "result": result,
    }


def dump_test_data(randfunc, indent=2) -> str:
    return json.dumps(generate_test_data(randfunc), indent=indent)
