from .reader import BinaryDetector, EncodingDetector, is_binary_file, get_file_encoding, read_text


__all__ = ["BinaryDetector", "EncodingDetector", "is_binary_file", "get_file_encoding", "read_text"]
