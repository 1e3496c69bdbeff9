from slisp.reader.parser import parse_value, parse_expression

__all__ = ["parse_value", "parse_expression"]
