"""
Election contract: the public bulletin board of a yes/no election.

It plays the role of the smart contract that checks every proof before
accepting a transition. Statuses go

    init -> key_declared -> voting -> tallying -> done

and a rejected call leaves the contract untouched.

05-05-2023
"""

import uuid

from evoting.crypto.arith import CurvePoint
from evoting.crypto.elgamal import EncryptedVote
from evoting.crypto.exceptions import InvalidGroupElement, ProofInvalid, WrongElectionStatus
from evoting.crypto.proofs import (
    ProofOfCorrectDecryption,
    ProofOfSkKnowledge,
    ProofOfVoteWellFormedness,
    verify_correct_decryption,
    verify_sk_knowledge,
    verify_vote_well_formedness,
)
from evoting.crypto.tally.tally import EncryptedTally, Tally
from evoting.election.enums import ElectionAdminEventEnum, ElectionPublicEventEnum, ElectionStatusEnum
from evoting.logger import election_logger


def _check_result(result, num_votes):
    if not isinstance(result, int) or isinstance(result, bool) or not 0 <= result <= num_votes:
        raise ProofInvalid("ProofOfCorrectDecryption", f"result must be between 0 and {num_votes}")


class ElectionContract(object):
    def __init__(self, election_id: str = None) -> None:
        self.election_id = election_id or str(uuid.uuid4())
        self.status = ElectionStatusEnum.init
        self.pk: CurvePoint = None
        self.encrypted_tally = EncryptedTally()
        self.result: Tally = None

    def _check_status(self, operation, *allowed):
        if self.status not in allowed:
            election_logger.warning(
                self.election_id,
                ElectionAdminEventEnum.TRANSITION_REJECTED,
                operation=operation,
                status=self.status.value,
            )
            raise WrongElectionStatus(operation, self.status)

    def _verify(self, operation, verify, *args):
        try:
            verify(*args)
        except ProofInvalid as e:
            election_logger.warning(
                self.election_id,
                ElectionAdminEventEnum.PROOF_REJECTED,
                operation=operation,
                reason=str(e),
            )
            raise

    def declare_pk(self, pk: CurvePoint, proof: ProofOfSkKnowledge):
        self._check_status("declare_pk", ElectionStatusEnum.init)
        if pk.is_identity():
            election_logger.warning(self.election_id, ElectionAdminEventEnum.PROOF_REJECTED, operation="declare_pk", reason="identity public key")
            raise InvalidGroupElement("the identity point is not a valid public key")
        self._verify("declare_pk", verify_sk_knowledge, proof, pk)

        self.pk = pk
        self.status = ElectionStatusEnum.key_declared
        election_logger.info(self.election_id, ElectionPublicEventEnum.PUBLIC_KEY_DECLARED, pk=pk.to_json())

    def start_voting(self):
        self._check_status("start_voting", ElectionStatusEnum.key_declared)

        self.status = ElectionStatusEnum.voting
        election_logger.info(self.election_id, ElectionPublicEventEnum.VOTING_STARTED)

    def cast_vote(self, proof: ProofOfVoteWellFormedness, encrypted_vote: EncryptedVote):
        self._check_status("cast_vote", ElectionStatusEnum.voting)
        self._verify("cast_vote", verify_vote_well_formedness, proof, encrypted_vote, self.pk)

        self.encrypted_tally = self.encrypted_tally.add(encrypted_vote)
        election_logger.info(self.election_id, ElectionPublicEventEnum.VOTE_CAST, num_votes=self.encrypted_tally.count)

    def stop_voting(self):
        self._check_status("stop_voting", ElectionStatusEnum.voting)

        self.status = ElectionStatusEnum.tallying
        election_logger.info(self.election_id, ElectionPublicEventEnum.VOTING_STOPPED, num_votes=self.encrypted_tally.count)

    def tally(self, proof: ProofOfCorrectDecryption, result: int):
        """
        Publishes the number of yes votes, proven to be the decryption
        of the accumulated tally.
        """
        self._check_status("tally", ElectionStatusEnum.tallying)
        self._verify("tally", _check_result, result, self.encrypted_tally.count)
        self._verify("tally", verify_correct_decryption, proof, self.encrypted_tally.votes, result, self.pk)

        self.result = Tally(num_yes=result, num_no=self.encrypted_tally.count - result)
        self.status = ElectionStatusEnum.done
        election_logger.info(self.election_id, ElectionPublicEventEnum.TALLY_PUBLISHED, **self.result.to_json())

    def get_pk(self) -> CurvePoint:
        if self.status == ElectionStatusEnum.init:
            raise WrongElectionStatus("get_pk", self.status)
        return self.pk

    def get_result(self) -> Tally:
        self._check_status("get_result", ElectionStatusEnum.done)
        return self.result

    def get_encrypted_tally(self) -> EncryptedTally:
        return self.encrypted_tally
