from banglisp.reader.parser import CharStream, Reader, read_from_string

__all__ = ["CharStream", "Reader", "read_from_string"]
