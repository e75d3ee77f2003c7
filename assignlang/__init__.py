import sys

from assignlang.interpreter import execute
from assignlang.parser.parser import Parser, run
from assignlang.scanner.scanner import Scanner, tokenize
from assignlang.token import Token
from assignlang.type import Type

# Default is 1000
sys.setrecursionlimit(5000)
