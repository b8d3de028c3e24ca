from cv_copilot.parsers.document_parser import load_document, parse_document, validate_upload
from cv_copilot.parsers.text_loader import clean_text, load_text_file

__all__ = ["clean_text", "load_document", "load_text_file", "parse_document", "validate_upload"]
