"""
Fixed-size landscape page surface on top of a ReportLab canvas.

All positions are millimetres measured from the top-left corner of the
page. Every call takes its position explicitly; the surface keeps no
text cursor between calls.
"""

# Standard Library
import io

# PIP3 modules
import PIL.Image
import reportlab.lib.utils
import reportlab.pdfbase.pdfmetrics
import reportlab.pdfgen.canvas

# local repo modules
import paperwork_composer as pwc
import paperwork_composer.config
import paperwork_composer.errors
import paperwork_composer.sanitize


PaperworkGenerationError = pwc.errors.PaperworkGenerationError
sanitize_text = pwc.sanitize.sanitize_text
mm_to_points = pwc.config.mm_to_points
points_to_mm = pwc.config.points_to_mm

PAGE_WIDTH = pwc.config.PAGE_WIDTH
PAGE_HEIGHT = pwc.config.PAGE_HEIGHT
CELL_PADDING = pwc.config.CELL_PADDING
TABLE_BORDER_GRAY = pwc.config.TABLE_BORDER_GRAY

# gofpdf-style default line width, 0.2 mm
BORDER_LINE_WIDTH = 0.2
# Baseline sits this fraction of the font size below the line box centre.
BASELINE_FACTOR = 0.3


#============================================
def compute_text_x(
	x: float,
	width: float | None,
	text_width: float,
	align: str,
	padding: float,
) -> float:
	"""
	Compute the left edge of a text run inside a box.

	Args:
		x: Box left edge.
		width: Box width, or None for an unbounded box.
		text_width: Measured text width.
		align: LEFT, CENTER or RIGHT.
		padding: Horizontal padding inside the box.

	Returns:
		Text x position in millimetres.
	"""
	normalized = align.strip().upper()
	if width is None or normalized == "LEFT":
		return x + padding
	if normalized == "RIGHT":
		return x + width - padding - text_width
	return x + (width - text_width) / 2.0


class PaperworkCanvas:
	"""
	One in-memory PDF document of US Letter landscape pages.
	"""

	#============================================
	def __init__(self, title: str = "") -> None:
		self.buffer = io.BytesIO()
		self.page_width_pt = mm_to_points(PAGE_WIDTH)
		self.page_height_pt = mm_to_points(PAGE_HEIGHT)
		self.pdf = reportlab.pdfgen.canvas.Canvas(
			self.buffer,
			pagesize=(self.page_width_pt, self.page_height_pt),
		)
		if title:
			self.pdf.setTitle(sanitize_text(title))
		self.page_count = 0
		self._saved = False

	#============================================
	def _pdf_y(self, y: float) -> float:
		return self.page_height_pt - mm_to_points(y)

	#============================================
	def new_page(self, background: reportlab.lib.utils.ImageReader | None = None) -> None:
		"""
		Start a page, painting the background full-bleed when given.

		Args:
			background: Background image, or None for a blank page.
		"""
		if self.page_count > 0:
			self.pdf.showPage()
		self.page_count += 1
		if background is None:
			return
		self.pdf.drawImage(
			background,
			0.0,
			0.0,
			width=self.page_width_pt,
			height=self.page_height_pt,
			mask=None,
			preserveAspectRatio=False,
			anchor="sw",
		)

	#============================================
	def measure_width(self, font: str, size: float, text: str) -> float:
		"""
		Measure a string in millimetres.

		Args:
			font: ReportLab font name.
			size: Font size in points.
			text: Text to measure.

		Returns:
			Width in millimetres.
		"""
		width_pt = reportlab.pdfbase.pdfmetrics.stringWidth(sanitize_text(text), font, size)
		return points_to_mm(width_pt)

	#============================================
	def place_text(
		self,
		x: float,
		y: float,
		font: str,
		size: float,
		text: str,
		height: float | None = None,
		width: float | None = None,
		align: str = "LEFT",
		padding: float = CELL_PADDING,
	) -> None:
		"""
		Draw one line of text inside a line box whose top edge is y.

		Args:
			x: Box left edge.
			y: Box top edge.
			font: ReportLab font name.
			size: Font size in points.
			text: Text to draw.
			height: Line box height; defaults to the font size.
			width: Box width used for CENTER and RIGHT alignment.
			align: LEFT, CENTER or RIGHT.
			padding: Horizontal padding inside the box.
		"""
		clean = sanitize_text(text)
		if not clean:
			return
		size_mm = points_to_mm(size)
		if height is None:
			height = size_mm
		text_width = self.measure_width(font, size, clean)
		text_x = compute_text_x(x, width, text_width, align, padding)
		baseline = y + height / 2.0 + BASELINE_FACTOR * size_mm
		self.pdf.setFont(font, size)
		self.pdf.setFillColorRGB(0.0, 0.0, 0.0)
		self.pdf.drawString(mm_to_points(text_x), self._pdf_y(baseline), clean)

	#============================================
	def wrap_text(self, font: str, size: float, text: str, max_width: float) -> list[str]:
		"""
		Split text into lines no wider than max_width millimetres.

		Explicit newlines start a new line. A word wider than the column
		is broken between characters.
		"""
		clean = sanitize_text(text)
		if not clean:
			return []
		max_points = mm_to_points(max_width)
		lines = []
		for line in reportlab.lib.utils.simpleSplit(clean, font, size, max_points):
			if reportlab.pdfbase.pdfmetrics.stringWidth(line, font, size) <= max_points:
				lines.append(line)
				continue
			lines.extend(self._break_long_line(line, font, size, max_points))
		return lines

	#============================================
	def _break_long_line(self, line: str, font: str, size: float, max_points: float) -> list[str]:
		pieces = []
		current = ""
		for char in line:
			candidate = current + char
			if current and reportlab.pdfbase.pdfmetrics.stringWidth(candidate, font, size) > max_points:
				pieces.append(current.rstrip())
				current = char.lstrip()
			else:
				current = candidate
		pieces.append(current)
		return [piece for piece in pieces if piece]

	#============================================
	def place_wrapped_text(
		self,
		x: float,
		y: float,
		max_width: float,
		line_height: float,
		font: str,
		size: float,
		text: str,
		align: str = "LEFT",
		max_lines: int | None = None,
	) -> float:
		"""
		Draw word-wrapped text flowing down from y.

		Args:
			x: Column left edge.
			y: Top edge of the first line.
			max_width: Column width.
			line_height: Distance between line tops.
			font: ReportLab font name.
			size: Font size in points.
			text: Text to wrap.
			align: LEFT, CENTER or RIGHT.
			max_lines: Optional line limit; the last kept line ends with "...".

		Returns:
			Top edge below the last line.
		"""
		lines = self.wrap_text(font, size, text, max_width - 2.0 * CELL_PADDING)
		if max_lines is not None and len(lines) > max_lines:
			lines = lines[:max(max_lines, 0)]
			if lines:
				lines[-1] = lines[-1].rstrip() + "..."
		for line in lines:
			self.place_text(x, y, font, size, line, height=line_height, width=max_width, align=align)
			y += line_height
		return y

	#============================================
	def draw_bordered_cell(
		self,
		x: float,
		y: float,
		width: float,
		height: float,
		text: str,
		font: str,
		size: float,
		align: str = "LEFT",
	) -> None:
		"""
		Draw a cell with a full light-gray border and its text.

		Args:
			x: Cell left edge.
			y: Cell top edge.
			width: Cell width.
			height: Cell height.
			text: Cell text.
			font: ReportLab font name.
			size: Font size in points.
			align: LEFT, CENTER or RIGHT.
		"""
		red, green, blue = TABLE_BORDER_GRAY
		self.pdf.setStrokeColorRGB(red / 255.0, green / 255.0, blue / 255.0)
		self.pdf.setLineWidth(mm_to_points(BORDER_LINE_WIDTH))
		self.pdf.rect(
			mm_to_points(x),
			self._pdf_y(y + height),
			mm_to_points(width),
			mm_to_points(height),
			stroke=1,
			fill=0,
		)
		self.place_text(x, y, font, size, text, height=height, width=width, align=align)

	#============================================
	def place_image(
		self,
		x: float,
		y: float,
		width: float,
		height: float,
		image: PIL.Image.Image | bytes | reportlab.lib.utils.ImageReader,
	) -> None:
		"""
		Draw a raster image with its top-left corner at (x, y).

		Args:
			x: Left edge.
			y: Top edge.
			width: Drawn width.
			height: Drawn height.
			image: PIL image, encoded raster bytes or ImageReader.
		"""
		if isinstance(image, bytes):
			reader = reportlab.lib.utils.ImageReader(io.BytesIO(image))
		elif isinstance(image, PIL.Image.Image):
			reader = reportlab.lib.utils.ImageReader(image)
		else:
			reader = image
		self.pdf.drawImage(
			reader,
			mm_to_points(x),
			self._pdf_y(y + height),
			width=mm_to_points(width),
			height=mm_to_points(height),
			mask=None,
			preserveAspectRatio=False,
			anchor="sw",
		)

	#============================================
	def serialize(self) -> bytes:
		"""
		Finish the document and return the PDF bytes.

		Returns:
			PDF bytes.
		"""
		if self._saved:
			raise PaperworkGenerationError("document was already serialized")
		try:
			# close the open page so a blank last page is kept
			if self.page_count > 0:
				self.pdf.showPage()
			self.pdf.save()
		except Exception as exc:
			raise PaperworkGenerationError(f"failed to generate PDF: {exc}") from exc
		self._saved = True
		return self.buffer.getvalue()
