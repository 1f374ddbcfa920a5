from evoting.crypto.proofs.sk_knowledge import ProofOfSkKnowledge, prove_sk_knowledge, verify_sk_knowledge
from evoting.crypto.proofs.well_formedness import (
    ProofOfVoteWellFormedness,
    prove_vote_well_formedness,
    verify_vote_well_formedness,
)
from evoting.crypto.proofs.correct_decryption import (
    ProofOfCorrectDecryption,
    prove_correct_decryption,
    verify_correct_decryption,
)
