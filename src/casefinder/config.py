from dataclasses import dataclass

DEFAULT_ALLOWED_EXTENSIONS = frozenset(('jpg', 'jpeg', 'png', 'gif', 'webp', 'svg'))
DEFAULT_MAX_LETTERS = 50

@dataclass(frozen=True)
class FinderConfig:
	base_directory: str
	base_url: str
	allowed_extensions: frozenset[str] = DEFAULT_ALLOWED_EXTENSIONS
	# 2^max_letters probes in the worst case, so this is a rejection ceiling, not a tractable bound
	max_letters: int = DEFAULT_MAX_LETTERS
