import pytest

from conftest import flip_bit

from evoting.crypto.arith import Challenge
from evoting.crypto.arith.params import Q
from evoting.crypto.elgamal import Vote, encrypt
from evoting.crypto.exceptions import EVotingError, FieldRangeError, MalformedEncoding, ProofInvalid, UnsupportedPlaintext
from evoting.crypto.proofs import (
    ProofOfVoteWellFormedness,
    prove_vote_well_formedness,
    verify_vote_well_formedness,
)
from evoting.crypto.protocol import encrypt_vote_with_proof


@pytest.mark.parametrize("vote", [Vote.NO, Vote.YES])
def test_valid_votes_are_proven_well_formed(randfunc, key_pair, vote):
    encrypted_vote, proof = encrypt_vote_with_proof(randfunc, vote, key_pair.pk)
    assert verify_vote_well_formedness(proof, encrypted_vote, key_pair.pk) is None
    assert encrypted_vote.decrypt(key_pair.sk, 1) == vote


@pytest.mark.parametrize("vote", [-1, 2, 7])
def test_other_votes_are_rejected_before_encryption(randfunc, key_pair, vote):
    with pytest.raises(UnsupportedPlaintext):
        encrypt_vote_with_proof(randfunc, vote, key_pair.pk)


def test_other_votes_are_rejected_at_proving_time(randfunc, key_pair):
    encrypted_vote, r = encrypt(randfunc, 2, key_pair.pk)
    with pytest.raises(UnsupportedPlaintext):
        prove_vote_well_formedness(randfunc, 2, encrypted_vote, r, key_pair.pk)


@pytest.mark.parametrize("claimed", [Vote.NO, Vote.YES])
def test_proof_for_an_encryption_of_two_does_not_verify(randfunc, key_pair, claimed):
    encrypted_vote, r = encrypt(randfunc, 2, key_pair.pk)
    proof = prove_vote_well_formedness(randfunc, claimed, encrypted_vote, r, key_pair.pk)
    with pytest.raises(ProofInvalid):
        verify_vote_well_formedness(proof, encrypted_vote, key_pair.pk)


def test_proof_with_wrong_claimed_vote_does_not_verify(randfunc, key_pair):
    encrypted_vote, r = encrypt(randfunc, Vote.YES, key_pair.pk)
    proof = prove_vote_well_formedness(randfunc, Vote.NO, encrypted_vote, r, key_pair.pk)
    with pytest.raises(ProofInvalid):
        verify_vote_well_formedness(proof, encrypted_vote, key_pair.pk)


def test_proof_is_bound_to_public_key(randfunc, key_pair, other_key_pair):
    encrypted_vote, proof = encrypt_vote_with_proof(randfunc, Vote.YES, key_pair.pk)
    with pytest.raises(ProofInvalid):
        verify_vote_well_formedness(proof, encrypted_vote, other_key_pair.pk)


def test_proof_is_bound_to_ciphertext(randfunc, key_pair):
    encrypted_vote, proof = encrypt_vote_with_proof(randfunc, Vote.YES, key_pair.pk)
    other_vote, _ = encrypt_vote_with_proof(randfunc, Vote.YES, key_pair.pk)
    with pytest.raises(ProofInvalid):
        verify_vote_well_formedness(proof, other_vote, key_pair.pk)


def test_swapped_branches_do_not_verify(randfunc, key_pair):
    encrypted_vote, proof = encrypt_vote_with_proof(randfunc, Vote.YES, key_pair.pk)
    swapped = ProofOfVoteWellFormedness(r0=proof.r1, r1=proof.r0, c0=proof.c1, c1=proof.c0)
    with pytest.raises(ProofInvalid):
        verify_vote_well_formedness(swapped, encrypted_vote, key_pair.pk)


def test_shifted_challenges_do_not_verify(randfunc, key_pair):
    encrypted_vote, proof = encrypt_vote_with_proof(randfunc, Vote.NO, key_pair.pk)
    shifted = ProofOfVoteWellFormedness(
        r0=proof.r0, r1=proof.r1, c0=proof.c0 + Challenge(1), c1=proof.c1 - Challenge(1)
    )
    with pytest.raises(ProofInvalid):
        verify_vote_well_formedness(shifted, encrypted_vote, key_pair.pk)


def test_proof_encoding(randfunc, key_pair):
    _, proof = encrypt_vote_with_proof(randfunc, Vote.YES, key_pair.pk)
    encoded = proof.to_bytes()
    assert len(encoded) == 96
    assert ProofOfVoteWellFormedness.from_bytes(encoded) == proof

    with pytest.raises(MalformedEncoding):
        ProofOfVoteWellFormedness.from_bytes(encoded[:-1])


def test_flipped_bit_in_proof_is_rejected(randfunc, key_pair):
    encrypted_vote, proof = encrypt_vote_with_proof(randfunc, Vote.YES, key_pair.pk)
    encoded = proof.to_bytes()
    for bit in range(0, len(encoded) * 8, 5):
        with pytest.raises(EVotingError):
            tampered = ProofOfVoteWellFormedness.from_bytes(flip_bit(encoded, bit))
            verify_vote_well_formedness(tampered, encrypted_vote, key_pair.pk)


def test_response_equal_to_group_order_is_rejected(randfunc, key_pair):
    _, proof = encrypt_vote_with_proof(randfunc, Vote.YES, key_pair.pk)
    tampered = Q.to_bytes(32, "big") + proof.to_bytes()[32:]
    with pytest.raises(FieldRangeError):
        ProofOfVoteWellFormedness.from_bytes(tampered)
