# tablex/ll1/runtime.py
"""LL(1) 예측 파서 런타임(스택 머신).

- `Grammar`(프로덕션 + 파싱 테이블)와 토큰 시퀀스를 받아
  입력을 **accept/reject** 판정하고, 매 단계의 스택 트레이스를 남깁니다.
- 거절은 예외가 아니라 값(`ParseResult(accepted=False, reason=...)`)입니다.
- 파서 상태(스택/커서/트레이스)는 호출마다 새로 만드는 `ParserConfig`가 소유합니다.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from tabulate import tabulate

from .symbols import EOF, Grammar

# 트레이스 액션 종류
MATCH = "match"
APPLY = "apply"
EPSILON = "epsilon"
REJECT = "rejected"

# 거절 사유
REASON_MISMATCH = "terminal mismatch"
REASON_NOT_CONSUMED = "input not fully consumed"


def no_rule_reason(X: str, a: str) -> str:
    return f"no rule for ({X}, {a})"


def tokenize(sentence: str) -> List[str]:
    """공백으로 나눈 토큰 시퀀스. 마지막이 '$'가 아니면 '$'를 덧붙인다."""
    toks = sentence.split()
    if not toks or toks[-1] != EOF:
        toks.append(EOF)
    return toks


@dataclass(frozen=True)
class TraceStep:
    """
    파서 한 단계의 기록.
    - stack     : `popped`를 꺼낸 뒤 남은 스택 (top이 앞)
    - lookahead : 현재 커서의 토큰(끝을 지나면 '$')
    - popped    : 이번 단계에 꺼낸 심볼
    - action    : match | apply | epsilon | rejected
    - production: apply/epsilon 일 때 적용한 프로덕션 인덱스
    """
    stack: Tuple[str, ...]
    lookahead: str
    popped: str
    action: str
    production: Optional[int] = None

    @property
    def before(self) -> Tuple[str, ...]:
        """단계 직전의 스택 (top이 앞)."""
        return (self.popped,) + self.stack


@dataclass(frozen=True)
class ParseResult:
    accepted: bool
    trace: Tuple[TraceStep, ...]
    tokens: Tuple[str, ...]
    consumed: int                  # 매치로 소비한 토큰 수('$' 포함)
    reason: Optional[str] = None

    def to_dict(self, grammar: Optional[Grammar] = None) -> Dict[str, Any]:
        """JSON 등 다른 표현 계층을 위한 구조화된 값."""
        steps = []
        for st in self.trace:
            d: Dict[str, Any] = {
                "stack": list(st.stack),
                "lookahead": st.lookahead,
                "popped": st.popped,
                "before": list(st.before),
                "action": st.action,
            }
            if st.production is not None:
                d["production"] = st.production
                if grammar is not None:
                    d["rule"] = grammar.format_production(st.production)
            steps.append(d)
        return {
            "accepted": self.accepted,
            "reason": self.reason,
            "tokens": list(self.tokens),
            "consumed": self.consumed,
            "trace": steps,
        }


@dataclass
class ParserConfig:
    """파싱 1회분의 가변 상태. 스택의 top은 리스트의 끝."""
    grammar: Grammar
    tokens: Sequence[str]
    stack: List[str] = field(default_factory=list)
    cursor: int = 0
    trace: List[TraceStep] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.stack:
            # '$'를 먼저 넣어 가장 마지막에 드러나게
            self.stack = [EOF, self.grammar.start]

    @property
    def lookahead(self) -> str:
        if self.cursor < len(self.tokens):
            return self.tokens[self.cursor]
        return EOF

    def snapshot(self) -> Tuple[str, ...]:
        return tuple(reversed(self.stack))

    def record(self, popped: str, lookahead: str, action: str, production: Optional[int] = None) -> None:
        self.trace.append(TraceStep(self.snapshot(), lookahead, popped, action, production))

    def finish(self, accepted: bool, reason: Optional[str] = None) -> ParseResult:
        return ParseResult(
            accepted=accepted,
            trace=tuple(self.trace),
            tokens=tuple(self.tokens),
            consumed=self.cursor,
            reason=reason,
        )


def parse(grammar: Grammar, tokens: Union[str, Sequence[str]]) -> ParseResult:
    """LL(1) 테이블로 토큰 시퀀스를 파싱합니다.

    Parameters
    ----------
    grammar : Grammar
        프로덕션과 (비단말, 단말) -> 프로덕션 인덱스 테이블.
    tokens : str | Sequence[str]
        토큰 시퀀스. 문자열이면 `tokenize`를 먼저 적용합니다.

    Returns
    -------
    ParseResult
        판정과 단계별 트레이스. 스택이 비는 순간 커서가 모든 토큰을
        소비했으면 accept, 아니면 "input not fully consumed".
    """
    if isinstance(tokens, str):
        tokens = tokenize(tokens)
    cfg = ParserConfig(grammar, list(tokens))

    while cfg.stack:
        X = cfg.stack.pop()
        a = cfg.lookahead

        if not grammar.is_nonterm(X):
            # 단말('$' 포함): 매치해야 한다
            if X != a:
                cfg.record(X, a, REJECT)
                return cfg.finish(False, REASON_MISMATCH)
            cfg.record(X, a, MATCH)
            cfg.cursor += 1
            continue

        idx = grammar.lookup(X, a)
        if idx is None:
            cfg.record(X, a, REJECT)
            return cfg.finish(False, no_rule_reason(X, a))

        rhs = grammar.prods[idx].rhs
        cfg.record(X, a, APPLY if rhs else EPSILON, idx)
        cfg.stack.extend(reversed(rhs))

    if cfg.cursor >= len(cfg.tokens):
        return cfg.finish(True)
    return cfg.finish(False, REASON_NOT_CONSUMED)


def derivation(grammar: Grammar, result: ParseResult) -> List[Tuple[str, ...]]:
    """트레이스의 프로덕션 적용을 최좌단 유도로 재생한 문장형식 목록.

    첫 원소는 (start,) 이고, 수락된 파싱이라면 마지막 원소는
    '$'를 뺀 입력 토큰과 같다. 펼친 심볼이 최좌단 비단말이 아니면 ValueError.
    """
    form: List[str] = [grammar.start]
    forms: List[Tuple[str, ...]] = [tuple(form)]
    for st in result.trace:
        if st.production is None:
            continue
        p = grammar.prods[st.production]
        pos = next((i for i, X in enumerate(form) if grammar.is_nonterm(X)), None)
        if pos is None or form[pos] != p.lhs:
            raise ValueError(
                f"Trace applies {p} but the leftmost nonterminal is "
                f"{form[pos] if pos is not None else None!r}")
        form[pos:pos + 1] = list(p.rhs)
        forms.append(tuple(form))
    return forms


def format_trace(result: ParseResult, grammar: Grammar, tablefmt: str = "simple") -> str:
    """Stack / Lookahead / Top / Production 표와 최종 판정."""
    rows = []
    for st in result.trace:
        if st.action == MATCH:
            what = "match"
        elif st.action == REJECT:
            what = "REJECTED"
        elif st.action == EPSILON:
            what = "epsilon"
        else:
            what = " ".join(grammar.prods[st.production].rhs)
        rows.append(["[" + ", ".join(st.stack) + "]", st.lookahead, st.popped, what])
    body = tabulate(rows, headers=["Stack", "Lookahead", "Top", "Production"], tablefmt=tablefmt)
    verdict = "ACCEPTED" if result.accepted else f"REJECTED: {result.reason}"
    return f"{body}\n\n{verdict}"
