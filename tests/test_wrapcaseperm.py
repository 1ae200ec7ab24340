import pytest

from collections.abc import Mapping

from fs.memoryfs import MemoryFS

from casefinder.wrapcaseperm import WrapCasePermutation

@pytest.fixture(scope="module")
def filesystem() -> WrapCasePermutation[MemoryFS]:
	memoryFS = MemoryFS()
	memoryFS.writetext('Photo.JPG', 'jpeg')
	memoryFS.writetext('photo.PNG', 'png')
	memoryFS.makedir('Sub')
	memoryFS.create('Sub/File.txt')

	return WrapCasePermutation(memoryFS)

def test_metadata(filesystem: WrapCasePermutation[MemoryFS]) -> None:
	assert filesystem.getmeta()['case_insensitive'] == True

def test_access(filesystem: WrapCasePermutation[MemoryFS]) -> None:
	assert sorted(n.name for n in filesystem.scandir('')) == ['Photo.JPG', 'Sub', 'photo.PNG']

	for name in ['photo.jpg', 'PHOTO.JPG', 'Photo.JPG', '/photo.Jpg']:
		assert filesystem.exists(name)
		assert filesystem.getinfo(name).name == 'Photo.JPG'

	assert filesystem.readtext('PHOTO.png') == 'png'
	assert not filesystem.exists('photo.gif')

def test_single_component_only(filesystem: WrapCasePermutation[MemoryFS]) -> None:
	assert filesystem.exists('Sub/File.txt')
	assert not filesystem.exists('sub/file.txt')
	assert not filesystem.exists('SUB/File.txt')

def test_directories_not_permuted(filesystem: WrapCasePermutation[MemoryFS]) -> None:
	assert filesystem.exists('Sub')
	assert not filesystem.exists('sub')

def test_letter_limit() -> None:
	memoryFS = MemoryFS()
	memoryFS.create('Photo.JPG')

	assert not WrapCasePermutation(memoryFS, max_letters=7).exists('photo.jpg')
	assert WrapCasePermutation(memoryFS, max_letters=8).exists('photo.jpg')

def test_passthru() -> None:
	class CaseInsensitiveFS(MemoryFS):
		def getmeta(self, namespace: str = "standard") -> Mapping[str, object]:
			return dict(super().getmeta(namespace), case_insensitive=True)

	memoryFS = CaseInsensitiveFS()
	memoryFS.create('Photo.JPG')

	filesystem = WrapCasePermutation(memoryFS)
	assert filesystem.exists('Photo.JPG')
	assert not filesystem.exists('photo.jpg')
