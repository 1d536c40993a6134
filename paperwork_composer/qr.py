"""
QR code targets and raster generation for artist detail pages.
"""

# PIP3 modules
import PIL.Image
import qrcode
import qrcode.constants
import qrcode.exceptions

# local repo modules
import paperwork_composer as pwc
import paperwork_composer.config
import paperwork_composer.errors


QrCodeError = pwc.errors.QrCodeError

DEFAULT_QR_PIXEL_SIZE = pwc.config.DEFAULT_QR_PIXEL_SIZE
QR_FALLBACK_URL = pwc.config.QR_FALLBACK_URL
QR_INSTAGRAM_URL = pwc.config.QR_INSTAGRAM_URL
QR_BOX_SIZE = 10


#============================================
def resolve_qr_url(social_handle: str, eid: str) -> str:
	"""
	Choose the URL a detail-page QR code points to.

	A full link is used verbatim, a bare handle becomes an Instagram
	profile link, and no handle falls back to the public event page.

	Args:
		social_handle: Artist social handle or link, may be empty.
		eid: Event EID.

	Returns:
		Target URL.
	"""
	handle = (social_handle or "").strip()
	if handle.startswith("http"):
		return handle
	if handle:
		if handle.startswith("@"):
			handle = handle[1:]
		return QR_INSTAGRAM_URL.format(handle=handle)
	return QR_FALLBACK_URL.format(eid=eid)


#============================================
def generate_qr_image(url: str, pixel_size: int = DEFAULT_QR_PIXEL_SIZE) -> PIL.Image.Image:
	"""
	Encode a URL as a borderless QR code raster.

	Args:
		url: Data to encode.
		pixel_size: Output width and height in pixels.

	Returns:
		RGB PIL image of pixel_size x pixel_size.
	"""
	if not url:
		raise QrCodeError("cannot encode an empty QR payload")
	if pixel_size <= 0:
		raise QrCodeError(f"invalid QR pixel size: {pixel_size}")
	qr = qrcode.QRCode(
		error_correction=qrcode.constants.ERROR_CORRECT_M,
		box_size=QR_BOX_SIZE,
		border=0,
	)
	try:
		qr.add_data(url)
		qr.make(fit=True)
	except (qrcode.exceptions.DataOverflowError, ValueError) as exc:
		raise QrCodeError(f"failed to encode QR payload: {exc}") from exc
	image = qr.make_image(fill_color="black", back_color="white").get_image()
	image = image.convert("RGB")
	return image.resize((pixel_size, pixel_size), PIL.Image.Resampling.NEAREST)
