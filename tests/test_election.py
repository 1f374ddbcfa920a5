import json

import pytest

from loguru import logger

from evoting.crypto.arith import CurvePoint, Scalar, base_mul, fiatshamir_challenge_generator
from evoting.crypto.arith.params import Q
from evoting.crypto.elgamal import EncryptedVote
from evoting.crypto.exceptions import InvalidGroupElement, ProofInvalid, WrongElectionStatus
from evoting.crypto.proofs import ProofOfCorrectDecryption, ProofOfSkKnowledge, ProofOfVoteWellFormedness
from evoting.crypto.protocol import decrypt_tally_with_proof, encrypt_vote_with_proof, new_key_pair_with_proof
from evoting.crypto.tally.tally import Tally
from evoting.election.contract import ElectionContract
from evoting.election.enums import ElectionStatusEnum
from evoting.gentests import dump_test_data, generate_test_data


@pytest.fixture
def election_events():
    records = []
    handler_id = logger.add(
        lambda message: records.append(message.record),
        filter=lambda record: record["level"].name == "ELECTION",
    )
    yield records
    logger.remove(handler_id)


@pytest.fixture
def authority(randfunc):
    return new_key_pair_with_proof(randfunc)


@pytest.fixture
def voting_contract(authority):
    key_pair, proof = authority
    contract = ElectionContract()
    contract.declare_pk(key_pair.pk, proof)
    contract.start_voting()
    return contract


def test_full_election(randfunc, authority, election_events):
    key_pair, proof = authority
    contract = ElectionContract(election_id="referendum")

    contract.declare_pk(key_pair.pk, proof)
    assert contract.status == ElectionStatusEnum.key_declared
    assert contract.get_pk() == key_pair.pk

    contract.start_voting()
    for vote in [1, 0, 0, 1, 0]:
        encrypted_vote, vote_proof = encrypt_vote_with_proof(randfunc, vote, contract.get_pk())
        contract.cast_vote(vote_proof, encrypted_vote)
    contract.stop_voting()
    assert contract.status == ElectionStatusEnum.tallying

    encrypted_tally = contract.get_encrypted_tally()
    result, decryption_proof = decrypt_tally_with_proof(randfunc, encrypted_tally.votes, encrypted_tally.count, key_pair)
    assert result == 2

    contract.tally(decryption_proof, result)
    assert contract.status == ElectionStatusEnum.done
    assert contract.get_result() == Tally(num_yes=2, num_no=3)

    events = [record["extra"]["event"] for record in election_events]
    assert events == [
        "public_key_declared",
        "voting_started",
        "vote_cast",
        "vote_cast",
        "vote_cast",
        "vote_cast",
        "vote_cast",
        "voting_stopped",
        "tally_published",
    ]
    assert all(record["extra"]["election_id"] == "referendum" for record in election_events)


def test_declare_pk_with_invalid_proof(randfunc, authority):
    key_pair, _ = authority
    _, other_proof = new_key_pair_with_proof(randfunc)
    contract = ElectionContract()

    with pytest.raises(ProofInvalid):
        contract.declare_pk(key_pair.pk, other_proof)
    assert contract.status == ElectionStatusEnum.init
    assert contract.pk is None


def test_identity_public_key_is_rejected(election_events):
    # a valid looking proof needs no secret for the identity point
    identity = CurvePoint.identity()
    s = Scalar(12345)
    forged = ProofOfSkKnowledge(s=s, c=fiatshamir_challenge_generator(identity, base_mul(s)))
    contract = ElectionContract()

    with pytest.raises(InvalidGroupElement):
        contract.declare_pk(identity, forged)
    assert contract.status == ElectionStatusEnum.init
    assert contract.pk is None
    assert [r["extra"]["event"] for r in election_events] == ["proof_rejected"]


def test_vote_under_other_key_is_rejected(randfunc, voting_contract):
    other_key_pair, _ = new_key_pair_with_proof(randfunc)
    encrypted_vote, proof = encrypt_vote_with_proof(randfunc, 1, other_key_pair.pk)

    with pytest.raises(ProofInvalid):
        voting_contract.cast_vote(proof, encrypted_vote)
    assert voting_contract.get_encrypted_tally().count == 0


def test_wrong_tally_result_is_rejected(randfunc, authority, voting_contract):
    key_pair, _ = authority
    for vote in [1, 1, 0]:
        encrypted_vote, proof = encrypt_vote_with_proof(randfunc, vote, key_pair.pk)
        voting_contract.cast_vote(proof, encrypted_vote)
    voting_contract.stop_voting()

    encrypted_tally = voting_contract.get_encrypted_tally()
    result, proof = decrypt_tally_with_proof(randfunc, encrypted_tally.votes, 3, key_pair)

    with pytest.raises(ProofInvalid):
        voting_contract.tally(proof, result + 1)
    assert voting_contract.status == ElectionStatusEnum.tallying

    voting_contract.tally(proof, result)
    assert voting_contract.get_result().num_yes == 2


def test_transitions_in_wrong_status(randfunc, authority, election_events):
    key_pair, proof = authority
    contract = ElectionContract()
    encrypted_vote, vote_proof = encrypt_vote_with_proof(randfunc, 1, key_pair.pk)

    with pytest.raises(WrongElectionStatus):
        contract.get_pk()
    with pytest.raises(WrongElectionStatus):
        contract.start_voting()
    with pytest.raises(WrongElectionStatus):
        contract.cast_vote(vote_proof, encrypted_vote)
    with pytest.raises(WrongElectionStatus):
        contract.get_result()

    contract.declare_pk(key_pair.pk, proof)
    with pytest.raises(WrongElectionStatus):
        contract.declare_pk(key_pair.pk, proof)
    with pytest.raises(WrongElectionStatus):
        contract.stop_voting()

    contract.start_voting()
    contract.stop_voting()
    with pytest.raises(WrongElectionStatus):
        contract.cast_vote(vote_proof, encrypted_vote)

    rejected = [r for r in election_events if r["extra"]["event"] == "transition_rejected"]
    assert len(rejected) == 6


def test_encrypted_tally_is_always_readable():
    assert ElectionContract().get_encrypted_tally().count == 0


def test_generated_test_data_drives_the_contract(randfunc):
    data = json.loads(dump_test_data(randfunc))

    contract = ElectionContract()
    pk_a = CurvePoint.deserialize(data["pk_a"], from_dict=True)
    pk_b = CurvePoint.deserialize(data["pk_b"], from_dict=True)

    with pytest.raises(ProofInvalid):
        contract.declare_pk(pk_a, ProofOfSkKnowledge.deserialize(data["proof_sk_knowledge_b"], from_dict=True))
    contract.declare_pk(pk_a, ProofOfSkKnowledge.deserialize(data["proof_sk_knowledge_a"], from_dict=True))
    assert pk_a != pk_b
    contract.start_voting()

    for vote, proof in zip(data["encrypted_votes_valid"], data["proofs_vote_well_formedness_valid"]):
        contract.cast_vote(
            ProofOfVoteWellFormedness.deserialize(proof, from_dict=True),
            EncryptedVote.deserialize(vote, from_dict=True),
        )
    for vote, proof in zip(data["encrypted_votes_invalid"], data["proofs_vote_well_formedness_invalid"]):
        with pytest.raises(ProofInvalid):
            contract.cast_vote(
                ProofOfVoteWellFormedness.deserialize(proof, from_dict=True),
                EncryptedVote.deserialize(vote, from_dict=True),
            )
    contract.stop_voting()

    with pytest.raises(ProofInvalid):
        contract.tally(ProofOfCorrectDecryption.deserialize(data["proof_correct_decryption_invalid"], from_dict=True), data["result"])
    contract.tally(ProofOfCorrectDecryption.deserialize(data["proof_correct_decryption_valid"], from_dict=True), data["result"])

    assert data["result"] == 3
    assert contract.get_result() == Tally(num_yes=3, num_no=2)


def test_generated_test_data_shape(randfunc):
    data = generate_test_data(randfunc)
    assert len(data["encrypted_votes_valid"]) == 5
    assert len(data["proofs_vote_well_formedness_valid"]) == 5
    assert len(data["encrypted_votes_invalid"]) == 2
    assert set(data["pk_a"]) == {"x", "y"}


@pytest.mark.parametrize("offset", [Q, -Q])
def test_result_congruent_to_true_count_is_rejected(randfunc, authority, voting_contract, offset):
    key_pair, _ = authority
    for vote in [1, 0, 0, 1, 0]:
        encrypted_vote, proof = encrypt_vote_with_proof(randfunc, vote, key_pair.pk)
        voting_contract.cast_vote(proof, encrypted_vote)
    voting_contract.stop_voting()

    encrypted_tally = voting_contract.get_encrypted_tally()
    result, proof = decrypt_tally_with_proof(randfunc, encrypted_tally.votes, 5, key_pair)
    assert result == 2

    with pytest.raises(ProofInvalid):
        voting_contract.tally(proof, result + offset)
    assert voting_contract.status == ElectionStatusEnum.tallying
    assert voting_contract.result is None

    voting_contract.tally(proof, result)
    assert voting_contract.get_result() == Tally(num_yes=2, num_no=3)


def test_result_above_number_of_votes_is_rejected(randfunc, authority, voting_contract):
    key_pair, _ = authority
    encrypted_vote, proof = encrypt_vote_with_proof(randfunc, 1, key_pair.pk)
    voting_contract.cast_vote(proof, encrypted_vote)
    voting_contract.stop_voting()

    encrypted_tally = voting_contract.get_encrypted_tally()
    _, proof = decrypt_tally_with_proof(randfunc, encrypted_tally.votes, 1, key_pair)

    with pytest.raises(ProofInvalid, match="between 0 and 1"):
        voting_contract.tally(proof, 2)
    assert voting_contract.status == ElectionStatusEnum.tallying
