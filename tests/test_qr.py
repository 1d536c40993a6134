import PIL.Image
import pytest

import paperwork_composer.errors
import paperwork_composer.qr


resolve_qr_url = paperwork_composer.qr.resolve_qr_url
generate_qr_image = paperwork_composer.qr.generate_qr_image


#============================================
def test_full_link_used_verbatim() -> None:
	"""
	Handles that already are links are not rewritten.
	"""
	url = resolve_qr_url("https://www.instagram.com/jane.paints/", "AB2995")
	assert url == "https://www.instagram.com/jane.paints/"
	assert resolve_qr_url("http://example.com/jane", "AB2995") == "http://example.com/jane"


#============================================
def test_handle_becomes_instagram_link() -> None:
	"""
	A bare handle, with or without @, links to Instagram.
	"""
	assert resolve_qr_url("@janedoe", "AB2995") == "https://instagram.com/janedoe"
	assert resolve_qr_url("janedoe", "AB2995") == "https://instagram.com/janedoe"
	assert resolve_qr_url("  @janedoe ", "AB2995") == "https://instagram.com/janedoe"


#============================================
def test_missing_handle_falls_back_to_event_page() -> None:
	"""
	No handle links to the public event page.
	"""
	assert resolve_qr_url("", "AB2995") == "https://artb.art/event/AB2995"
	assert resolve_qr_url(None, "AB2995") == "https://artb.art/event/AB2995"
	assert resolve_qr_url("   ", "AB2995") == "https://artb.art/event/AB2995"


#============================================
def test_qr_image_size_and_ink() -> None:
	"""
	The raster is square at the requested size and starts with a dark module.
	"""
	image = generate_qr_image("https://instagram.com/janedoe", 256)
	assert isinstance(image, PIL.Image.Image)
	assert image.size == (256, 256)
	assert image.mode == "RGB"
	# borderless: the finder pattern touches the corner
	assert image.getpixel((0, 0)) == (0, 0, 0)
	gray = image.convert("L")
	dark = sum(1 for value in gray.getdata() if value < 128)
	assert 0.2 < dark / (256 * 256) < 0.8


#============================================
def test_qr_failures_raise_qr_error() -> None:
	"""
	Empty or oversized payloads raise QrCodeError.
	"""
	with pytest.raises(paperwork_composer.errors.QrCodeError):
		generate_qr_image("")
	with pytest.raises(paperwork_composer.errors.QrCodeError):
		generate_qr_image("https://example.com/" + "x" * 5000)
	with pytest.raises(paperwork_composer.errors.QrCodeError):
		generate_qr_image("https://example.com", 0)
