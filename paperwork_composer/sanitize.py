"""
Text cleanup before anything is placed on a page.
"""


PUNCTUATION_REPLACEMENTS = {
	"\u201c": "\"",
	"\u201d": "\"",
	"\u2018": "'",
	"\u2019": "'",
	"\u2013": "-",
	"\u2014": "-",
	"\u2026": "...",
	"\x00": "",
}


#============================================
def sanitize_text(value: str) -> str:
	"""
	Replace typographic punctuation with ASCII and drop NUL bytes.

	Characters without a mapping pass through unchanged, so accented
	names and currency symbols survive.

	Args:
		value: Input text.

	Returns:
		Sanitized text.
	"""
	if not value:
		return ""
	for old, new in PUNCTUATION_REPLACEMENTS.items():
		value = value.replace(old, new)
	return value
