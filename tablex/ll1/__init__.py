"""tablex LL(1): 고정 문법, 테이블 유도, 예측 파서 런타임."""

from .symbols import EOF, Grammar, Production
from .expr import EXPR
from .runtime import ParseResult, TraceStep, derivation, format_trace, parse, tokenize
