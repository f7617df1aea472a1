from schemelet.reader.scanner import Scanner, ScanResult, Token, TokenType, scan
from schemelet.reader.parser import Parser, parse

__all__ = ["Scanner", "ScanResult", "Token", "TokenType", "scan", "Parser", "parse"]
