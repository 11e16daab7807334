import os
from typing import Optional


BINARY_SIGNATURES = [
    b'\x89PNG\r\n\x1a\n',
    b'\xff\xd8\xff',
    b'GIF87a',
    b'GIF89a',
    b'PK\x03\x04',
    b'%PDF',
    b'\x7fELF',
    b'\x1f\x8b',
    b'BZh',
    b'\xfd7zXZ\x00',
    b'Rar!\x1a\x07',
]


BINARY_EXTENSIONS = {
    '.png', '.jpg', '.jpeg', '.gif', '.bmp', '.ico', '.webp',
    '.pdf', '.docx', '.xlsx', '.pptx',
    '.zip', '.rar', '.7z', '.tar', '.gz', '.bz2', '.xz',
    '.exe', '.dll', '.so', '.dylib', '.bin',
    '.mp3', '.mp4', '.wav', '.ogg',
    '.pyc', '.class', '.o',
    '.db', '.sqlite', '.sqlite3',
}


CHECK_SIZE = 8192
NON_TEXT_THRESHOLD = 0.30


class BinaryDetector:
    def __init__(self):
        self.signatures = BINARY_SIGNATURES
        self.binary_extensions = BINARY_EXTENSIONS
        self.check_size = CHECK_SIZE
        self.threshold = NON_TEXT_THRESHOLD

    def is_binary_by_extension(self, filepath: str) -> bool:
        return os.path.splitext(filepath)[1].lower() in self.binary_extensions

    def is_binary_by_signature(self, data: bytes) -> bool:
        return any(data.startswith(sig) for sig in self.signatures)

    def is_binary_by_content(self, data: bytes) -> bool:
        if not data:
            return False
        if data.startswith((b'\xff\xfe', b'\xfe\xff')):
            return False
        if b'\x00' in data:
            return True
        try:
            data.decode('utf-8')
            return False
        except UnicodeDecodeError:
            pass
        text_chars = bytearray({7, 8, 9, 10, 12, 13, 27} | set(range(0x20, 0x100)))
        non_text = sum(1 for byte in data if byte not in text_chars)
        return (non_text / len(data)) > self.threshold

    def check_file(self, filepath: str) -> bool:
        if not os.path.exists(filepath):
            raise FileNotFoundError(f"File not found: {filepath}")
        if not os.path.isfile(filepath):
            raise ValueError(f"Not a file: {filepath}")
        if os.path.getsize(filepath) == 0:
            return False
        if self.is_binary_by_extension(filepath):
            return True
        with open(filepath, 'rb') as f:
            chunk = f.read(self.check_size)
        if self.is_binary_by_signature(chunk):
            return True
        return self.is_binary_by_content(chunk)


def is_binary_file(filepath: str) -> bool:
    return BinaryDetector().check_file(filepath)


class EncodingDetector:
    ENCODINGS = ['utf-8', 'cp1252', 'latin-1']

    BOM_ENCODINGS = {
        b'\xef\xbb\xbf': 'utf-8-sig',
        b'\xff\xfe': 'utf-16',
        b'\xfe\xff': 'utf-16',
    }

    def detect_bom(self, data: bytes) -> Optional[str]:
        for bom, encoding in self.BOM_ENCODINGS.items():
            if data.startswith(bom):
                return encoding
        return None

    def detect_from_content(self, data: bytes, truncated: bool = False) -> str:
        """Guess the encoding of ``data``.

        ``truncated`` means ``data`` is a sample cut from a longer file, so a
        multibyte sequence split at its end still counts as UTF-8.
        """
        bom_encoding = self.detect_bom(data)
        if bom_encoding:
            return bom_encoding
        for encoding in self.ENCODINGS:
            try:
                data.decode(encoding)
                return encoding
            except UnicodeDecodeError as e:
                if truncated and encoding == 'utf-8' and e.reason == 'unexpected end of data':
                    return encoding
                continue
        return 'utf-8'

    def detect_encoding(self, filepath: str) -> str:
        with open(filepath, 'rb') as f:
            data = f.read(CHECK_SIZE + 1)
        return self.detect_from_content(data[:CHECK_SIZE], truncated=len(data) > CHECK_SIZE)


def get_file_encoding(filepath: str) -> str:
    return EncodingDetector().detect_encoding(filepath)


def read_text(filepath: str, encoding: Optional[str] = None) -> str:
    """Whole file as text, newlines untouched; line splitting is left to the diff engine."""
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"File not found: {filepath}")
    if is_binary_file(filepath):
        raise ValueError(f"Cannot diff binary file: {filepath}")
    enc = encoding or get_file_encoding(filepath)
    with open(filepath, 'r', encoding=enc, errors='replace', newline='') as f:
        return f.read()
