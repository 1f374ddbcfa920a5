"""
Enums for the election state machine.

25-04-2023
"""

import enum


class ElectionStatusEnum(str, enum.Enum):
    init = "Init"
    key_declared = "Key declared"
    voting = "Voting"
    tallying = "Tallying"
    done = "Done"


class ElectionEventEnum(str, enum.Enum):
    @classmethod
    def has_member_key(cls, key):
        return key in cls.__members__.values()


class ElectionPublicEventEnum(ElectionEventEnum):
    PUBLIC_KEY_DECLARED = "public_key_declared"
    VOTING_STARTED = "voting_started"
    VOTE_CAST = "vote_cast"
    VOTING_STOPPED = "voting_stopped"
    TALLY_PUBLISHED = "tally_published"


class ElectionAdminEventEnum(ElectionEventEnum):
    PROOF_REJECTED = "proof_rejected"
    TRANSITION_REJECTED = "transition_rejected"
