# tablex/dfa/__init__.py
"""tablex DFA 엔진 — 전이표(transition table)로 구동되는 결정적 유한 오토마타.

특징
----
- 하나의 범용 스테퍼(`run`)가 모든 패턴을 처리한다. 패턴별 제어 흐름은 없고
  **데이터(DfaDef)** 만 다르다.
- 문자 → 알파벳 인덱스 변환은 패턴마다의 `classifier`가 담당한다.
  분류되지 않은 문자는 예약된 "other" 열(마지막 열)로 떨어지고, 표를 통해 거절된다.
- `DEAD`(-1)는 흡수(absorbing) 상태: 한 번 들어가면 빠져나오지 않는다.
- 정의는 생성 시점에 검증되고 이후 **불변**이다. 호출 간 상태를 공유하지 않는다.

API
---
- `DfaDef(name, classifier, table, accept_states, ...)`
- `run(dfa, text) -> Recognition`   # 방문 상태 경로 포함
- `recognize(dfa, text) -> bool`
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, FrozenSet, Optional, Tuple

DEAD = -1

# 검증 시 classifier에 넣어보는 문자 범위(7-bit ASCII)
_PROBE_CHARS = "".join(chr(i) for i in range(128))


@dataclass(frozen=True)
class Recognition:
    accepted: bool
    final_state: int          # 조기 거절이면 DEAD
    path: Tuple[int, ...]     # 방문한 상태들 (0번 시작 상태 포함)


@dataclass(frozen=True)
class DfaDef:
    """
    DfaDef
    ======
    패턴 하나를 인식하는 DFA 정의.

    필드
    ----
    - name         : 보고용 패턴 이름 (예: "VARIABLE")
    - classifier   : 문자 → 열 인덱스(0..width-1). 전함수(total)여야 한다.
    - table        : table[state][class] -> next_state | DEAD
    - accept_states: 수락 상태 집합
    - reference    : (선택) 동치 정규식 원문. 교차검증(check) 용도
    - description  : 사람이 읽는 패턴 요약

    불변식
    ------
    - 0번 상태가 유일한 시작 상태
    - 모든 행의 폭이 같고, 모든 전이 대상은 DEAD 또는 유효한 상태 번호
    - ASCII 전 범위에 대해 classifier 결과가 열 범위 안에 있다
    위반 시 생성 시점에 ValueError.
    """
    name: str
    classifier: Callable[[str], int]
    table: Tuple[Tuple[int, ...], ...]
    accept_states: FrozenSet[int]
    reference: Optional[str] = None
    description: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        # 리스트로 넘겨도 불변 형태로 고정
        object.__setattr__(self, "table", tuple(tuple(row) for row in self.table))
        object.__setattr__(self, "accept_states", frozenset(self.accept_states))
        self._validate()

    @property
    def n_states(self) -> int:
        return len(self.table)

    @property
    def width(self) -> int:
        """알파벳(열) 개수. "other" 열 포함."""
        return len(self.table[0]) if self.table else 0

    def _validate(self) -> None:
        if not self.table:
            raise ValueError(f"DFA {self.name!r}: empty transition table")
        width = self.width
        n = self.n_states
        for s, row in enumerate(self.table):
            if len(row) != width:
                raise ValueError(
                    f"DFA {self.name!r}: row S{s} has {len(row)} columns, expected {width}")
            for c, target in enumerate(row):
                if target != DEAD and not (0 <= target < n):
                    raise ValueError(
                        f"DFA {self.name!r}: S{s}[{c}] -> {target} is out of range (0..{n - 1})")
        for a in self.accept_states:
            if not (0 <= a < n):
                raise ValueError(f"DFA {self.name!r}: accept state {a} is out of range (0..{n - 1})")
        for ch in _PROBE_CHARS:
            c = self.classifier(ch)
            if not (0 <= c < width):
                raise ValueError(
                    f"DFA {self.name!r}: classifier maps {ch!r} to column {c}, expected 0..{width - 1}")

    def step(self, state: int, ch: str) -> int:
        """한 문자 전이. DEAD에서는 DEAD를 그대로 돌려준다."""
        if state == DEAD:
            return DEAD
        return self.table[state][self.classifier(ch)]


def run(dfa: DfaDef, text: str) -> Recognition:
    """DFA를 입력 끝까지(또는 DEAD까지) 구동하고 방문 경로와 함께 판정을 돌려준다.

    알고리즘
    --------
    state := 0. 각 문자에 대해 분류 → 현재 상태가 DEAD면 즉시 거절(단락 평가)
    → 아니면 table[state][class]로 이동. 입력을 다 소비한 뒤
    최종 상태가 accept_states에 있으면 수락.
    예외 경로는 없다: 예상 밖 문자는 "other" 열을 통해 거절로 귀결된다.
    """
    state = 0
    path = [state]
    for ch in text:
        cls = dfa.classifier(ch)
        if state == DEAD:
            break
        state = dfa.table[state][cls]
        path.append(state)
    accepted = state != DEAD and state in dfa.accept_states
    return Recognition(accepted=accepted, final_state=state, path=tuple(path))


def recognize(dfa: DfaDef, text: str) -> bool:
    """`text`가 `dfa` 패턴에 속하면 True."""
    return run(dfa, text).accepted


def format_path(path: Tuple[int, ...]) -> str:
    """방문 경로를 `S0 -> S1 -> DEAD` 형태로."""
    return " -> ".join("DEAD" if s == DEAD else f"S{s}" for s in path)
