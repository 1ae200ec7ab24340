import pytest

from fs.memoryfs import MemoryFS

class RecordingFS(MemoryFS):
	"""MemoryFS remembering every ``isfile`` probe."""

	def __init__(self) -> None:
		super().__init__()
		self.probed: list[str] = []

	def isfile(self, path: str) -> bool:
		self.probed.append(path)
		return super().isfile(path)

@pytest.fixture
def recording_fs() -> RecordingFS:
	return RecordingFS()
