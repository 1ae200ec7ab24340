class ResolutionError(Exception):
	status: int = 500
	message: str = 'Resolution failed'

	def __init__(self, detail: str | None = None) -> None:
		super().__init__(detail or self.message)

class MissingParameter(ResolutionError):
	status = 400
	message = 'Missing image parameter'

class DisallowedExtension(ResolutionError):
	status = 403
	message = 'File type not allowed'

class CandidateTooComplex(ResolutionError):
	status = 400
	message = 'Filename too long for case search'

class NotFound(ResolutionError):
	status = 404
	message = 'File not found'
