"""
Font and background lookup with degrade-to-default fallbacks.
"""

# Standard Library
import logging
import pathlib
from typing import Protocol

# PIP3 modules
import PIL.Image
import reportlab.lib.utils
import reportlab.pdfbase.pdfmetrics
import reportlab.pdfbase.ttfonts

# local repo modules
import paperwork_composer as pwc
import paperwork_composer.config


FONT_FILES = pwc.config.FONT_FILES
FALLBACK_FONTS = pwc.config.FALLBACK_FONTS
BACKGROUND_FILES = pwc.config.BACKGROUND_FILES

logger = logging.getLogger(__name__)


class AssetResolver(Protocol):
	def load_font(self, face: str) -> str:
		...

	def load_background(self, page_kind: str) -> reportlab.lib.utils.ImageReader | None:
		...


class DefaultAssetResolver:
	"""
	Built-in Helvetica faces and blank pages; touches no files.
	"""

	def load_font(self, face: str) -> str:
		return FALLBACK_FONTS.get(face, FALLBACK_FONTS[pwc.config.FONT_MEDIUM])

	def load_background(self, page_kind: str) -> reportlab.lib.utils.ImageReader | None:
		return None


class FilesystemAssetResolver:
	"""
	Load TTF fonts and PNG backgrounds from the templates directories.
	"""

	#============================================
	def __init__(self, fonts_path: str | pathlib.Path, backgrounds_path: str | pathlib.Path) -> None:
		self.fonts_path = pathlib.Path(fonts_path)
		self.backgrounds_path = pathlib.Path(backgrounds_path)

	#============================================
	def load_font(self, face: str) -> str:
		"""
		Register the TTF font for a face, or fall back to Helvetica.

		Args:
			face: Logical face name (medium, bold, semibold).

		Returns:
			ReportLab font name to draw with.
		"""
		fallback = FALLBACK_FONTS.get(face, FALLBACK_FONTS[pwc.config.FONT_MEDIUM])
		if face not in FONT_FILES:
			logger.warning("Unknown font face %r, using %s", face, fallback)
			return fallback
		font_name, file_name = FONT_FILES[face]
		font_path = self.fonts_path / file_name
		if not font_path.is_file():
			logger.warning("Font file not found, using default: %s (%s)", font_path, fallback)
			return fallback
		try:
			reportlab.pdfbase.pdfmetrics.registerFont(
				reportlab.pdfbase.ttfonts.TTFont(font_name, str(font_path))
			)
		except (reportlab.pdfbase.ttfonts.TTFError, OSError) as exc:
			logger.warning("Font file unreadable, using default: %s (%s)", font_path, exc)
			return fallback
		logger.debug("Added custom font %s from %s", font_name, file_name)
		return font_name

	#============================================
	def load_background(self, page_kind: str) -> reportlab.lib.utils.ImageReader | None:
		"""
		Load the background image for a page type.

		Args:
			page_kind: Page type key from BACKGROUND_FILES.

		Returns:
			ImageReader, or None when the image is missing or unreadable.
		"""
		file_name = BACKGROUND_FILES.get(page_kind)
		if file_name is None:
			logger.debug("No background configured for page kind %r", page_kind)
			return None
		background_path = self.backgrounds_path / file_name
		if not background_path.is_file():
			logger.debug("Background image not found, using blank page: %s", background_path)
			return None
		try:
			image = PIL.Image.open(background_path)
			image.load()
		except (PIL.UnidentifiedImageError, OSError) as exc:
			logger.warning("Background image unreadable, using blank page: %s (%s)", background_path, exc)
			return None
		return reportlab.lib.utils.ImageReader(image)


#============================================
def load_fonts(resolver: AssetResolver) -> dict[str, str]:
	"""
	Resolve every logical face once for a render.

	Args:
		resolver: Asset resolver.

	Returns:
		Dict of face -> ReportLab font name.
	"""
	return {face: resolver.load_font(face) for face in FONT_FILES}
