"""tablex — 전이표 기반 DFA 패턴 인식기와 LL(1) 예측 파서."""

__version__ = "0.1.0"

from .dfa import DEAD, DfaDef, Recognition, recognize, run
from .dfa.registry import FUNCTION, LOOP_LABEL, PATTERNS, VARIABLE, classify, get_pattern
from .ll1 import EOF, EXPR, Grammar, ParseResult, Production, TraceStep, parse, tokenize
