from .candidate import Candidate, validate_filename
from .config import FinderConfig
from .errors import CandidateTooComplex, DisallowedExtension, MissingParameter, NotFound, ResolutionError
from .finder import CaseFinder, Resolution, public_url
from .resolver import CasePermutationResolver, case_permutations, letter_positions
from .wrapcaseperm import WrapCasePermutation
