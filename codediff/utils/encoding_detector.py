# codediff/utils/encoding_detector.py

import chardet
from codediff.utils.logger import logger

def detect_file_encoding(file_path: str) -> str:
    """
    Detect the encoding of a file.

    Args:
        file_path (str): Path to the file

    Returns:
        str: Detected encoding or 'utf-8' as fallback
    """
    try:
        with open(file_path, 'rb') as f:
            raw = f.read(10000)  # Read first 10KB
    except OSError as e:
        logger.error(f"Failed to detect encoding for {file_path}: {str(e)}")
        return 'utf-8'
    # Fast path: UTF-8 is common; if it decodes, use it without chardet
    try:
        raw.decode('utf-8')
        return 'utf-8'
    except UnicodeDecodeError:
        pass
    result = chardet.detect(raw)
    return result.get('encoding') or 'utf-8'

def read_text_file(file_path: str) -> str:
    """Read a file with its detected encoding and normalize line endings to \\n."""
    enc = detect_file_encoding(file_path)
    with open(file_path, 'r', encoding=enc, errors='replace') as f:
        text = f.read()
    return text.replace("\r\n", "\n").replace("\r", "\n")
