"""
Exception types raised by the paperwork composer.
"""


class PaperworkError(Exception):
	"""
	Base class for paperwork failures.
	"""


class PayloadError(PaperworkError):
	"""
	The event payload is malformed or unusable.
	"""


class EmptyRosterError(PayloadError):
	"""
	The payload has no artist eligible for the roster.
	"""


class EventNotFoundError(PaperworkError):
	"""
	No payload exists for the requested event.
	"""


class QrCodeError(PaperworkError):
	"""
	A QR code could not be generated.
	"""


class PaperworkGenerationError(PaperworkError):
	"""
	The canvas could not produce the final document bytes.
	"""
