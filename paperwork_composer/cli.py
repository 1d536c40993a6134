"""
CLI entry points for event paperwork rendering.
"""

# Standard Library
import argparse
import io
import json
import logging
import os
import pathlib
import sys
import time

# PIP3 modules
import pypdf

# local repo modules
import paperwork_composer as pwc
import paperwork_composer.assets
import paperwork_composer.composer
import paperwork_composer.config
import paperwork_composer.errors
import paperwork_composer.models
import paperwork_composer.source


ComposerConfig = pwc.config.ComposerConfig
ComposedDocument = pwc.composer.ComposedDocument
PaperworkError = pwc.errors.PaperworkError

OUTPUT_FILENAME = pwc.config.OUTPUT_FILENAME


#============================================
def build_config(args: argparse.Namespace) -> ComposerConfig:
	"""
	Build composer config from CLI args.

	Args:
		args: Parsed argparse namespace.

	Returns:
		ComposerConfig.
	"""
	templates_path = args.templates_path
	fonts_path = args.fonts_path or str(pathlib.Path(templates_path) / "fonts")
	backgrounds_path = args.backgrounds_path or str(pathlib.Path(templates_path) / "backgrounds")
	return ComposerConfig(
		templates_path=templates_path,
		fonts_path=fonts_path,
		backgrounds_path=backgrounds_path,
		round_count=args.round_count,
		history_cap=args.history_cap,
		qr_pixel_size=args.qr_pixel_size,
	)


#============================================
def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse command line arguments.

	Returns:
		Parsed argparse namespace.
	"""
	defaults = pwc.config.default_config()
	parser = argparse.ArgumentParser(description="Render event paperwork PDFs from paperwork-data payloads.")
	parser.add_argument("source", help="Payload JSON file, or an event EID with --payload-dir.")

	input_group = parser.add_argument_group("Input")
	input_group.add_argument("-d", "--payload-dir", dest="payload_dir", default=None, help="Directory of <EID>.json payloads.")
	input_group.add_argument("-t", "--templates", dest="templates_path", default=defaults.templates_path, help="Templates directory.")
	input_group.add_argument("--fonts", dest="fonts_path", default=os.environ.get("FONTS_PATH"), help="Fonts directory (default: <templates>/fonts).")
	input_group.add_argument("--backgrounds", dest="backgrounds_path", default=os.environ.get("BACKGROUNDS_PATH"), help="Backgrounds directory (default: <templates>/backgrounds).")

	output_group = parser.add_argument_group("Output")
	output_group.add_argument("-o", "--output", dest="output_path", default=None, help="Output PDF path.")
	output_group.add_argument("-m", "--manifest", dest="manifest_path", default=None, help="Output manifest JSON path.")

	layout_group = parser.add_argument_group("Layout")
	layout_group.add_argument("-r", "--rounds", dest="round_count", type=int, default=defaults.round_count, help="Expected number of rounds.")
	layout_group.add_argument("--history-cap", dest="history_cap", type=int, default=defaults.history_cap, help="Past events listed per artist.")
	layout_group.add_argument("--qr-pixels", dest="qr_pixel_size", type=int, default=defaults.qr_pixel_size, help="QR raster size in pixels.")

	parser.add_argument("-v", "--verbose", dest="verbose", action="store_true", help="Enable debug logging.")
	parser.set_defaults(verbose=False)

	args = parser.parse_args(argv)
	return args


#============================================
def load_source(args: argparse.Namespace) -> pwc.models.PaperworkPayload:
	"""
	Load the payload named on the command line.
	"""
	if args.payload_dir is not None:
		return pwc.source.load_event_payload(args.payload_dir, args.source)
	return pwc.source.load_payload_file(args.source)


#============================================
def count_pdf_pages(pdf_bytes: bytes) -> int:
	"""
	Count the pages of rendered PDF bytes.
	"""
	buffer = io.BytesIO(pdf_bytes)
	reader = pypdf.PdfReader(buffer)
	return len(reader.pages)


#============================================
def write_manifest(
	manifest_path: pathlib.Path,
	payload: pwc.models.PaperworkPayload,
	document: ComposedDocument,
	output_path: pathlib.Path,
	config: ComposerConfig,
) -> None:
	"""
	Write a manifest JSON file.

	Args:
		manifest_path: Output path.
		payload: Rendered payload.
		document: Composed document.
		output_path: PDF path.
		config: Composer config.
	"""
	page_counts: dict[str, int] = {}
	for page in document.pages:
		page_counts[page.kind] = page_counts.get(page.kind, 0) + 1
	data = {
		"eid": payload.event.eid,
		"event_name": payload.event.name,
		"output": str(output_path),
		"pdf_size_bytes": len(document.pdf_bytes),
		"pdf_page_count": count_pdf_pages(document.pdf_bytes),
		"artist_count": len(payload.artists),
		"auction_lots": len(payload.auction_lots),
		"page_counts": page_counts,
		"pages": [
			{"kind": page.kind, "title": page.title, "artist_name": page.artist_name}
			for page in document.pages
		],
		"layout": {
			"page_width_mm": pwc.config.PAGE_WIDTH,
			"page_height_mm": pwc.config.PAGE_HEIGHT,
			"round_count": config.round_count,
			"history_cap": config.history_cap,
			"qr_pixel_size": config.qr_pixel_size,
		},
		"assets": {
			"fonts_path": config.fonts_path,
			"backgrounds_path": config.backgrounds_path,
		},
	}
	with manifest_path.open("w", encoding="utf-8") as handle:
		json.dump(data, handle, indent=2, sort_keys=True, ensure_ascii=False)


#============================================
def run_pipeline(args: argparse.Namespace) -> None:
	"""
	Load a payload, render the paperwork and write the outputs.

	Args:
		args: Parsed argparse namespace.
	"""
	config = build_config(args)
	print("Event paperwork pipeline")
	print(f"Source: {args.source}")
	print(f"Fonts: {config.fonts_path}")
	print(f"Backgrounds: {config.backgrounds_path}")
	print(f"Rounds: {config.round_count}")

	start_time = time.perf_counter()
	payload = load_source(args)
	load_end = time.perf_counter()
	print(f"Event: {payload.event.eid} {payload.event.name}")
	print(f"Artists: {len(payload.artists)}")
	print(f"Auction lots: {len(payload.auction_lots)}")

	output_path = args.output_path
	if output_path is None:
		output_path = OUTPUT_FILENAME.format(eid=payload.event.eid)
	output_path = pathlib.Path(output_path)

	assets = pwc.assets.FilesystemAssetResolver(config.fonts_path, config.backgrounds_path)
	render_start = time.perf_counter()
	document = pwc.composer.compose_document(
		payload.event,
		payload.artists,
		payload.auction_lots,
		config=config,
		assets=assets,
	)
	render_end = time.perf_counter()
	output_path.write_bytes(document.pdf_bytes)
	print(f"Pages written: {len(document.pages)}")
	print(f"Output PDF: {output_path}")

	manifest_path = args.manifest_path
	if manifest_path is None:
		manifest_path = f"{output_path}.json"
	write_manifest(pathlib.Path(manifest_path), payload, document, output_path, config)
	print(f"Manifest written: {manifest_path}")

	total_time = time.perf_counter() - start_time
	print(
		"Timing: load={:.2f}s render={:.2f}s total={:.2f}s".format(
			load_end - start_time,
			render_end - render_start,
			total_time,
		)
	)


#============================================
def main(argv: list[str] | None = None) -> int:
	"""
	Main entry point.

	Returns:
		Process exit status.
	"""
	args = parse_args(argv)
	level = logging.DEBUG if args.verbose else logging.WARNING
	logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
	try:
		run_pipeline(args)
	except PaperworkError as exc:
		print(f"Error: {exc}", file=sys.stderr)
		return 1
	return 0
