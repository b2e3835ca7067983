"""가중치 테이블: 가중 랜덤 추출과 원형 이웃 강화(favor)"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from config import DECAY_THEN_BOOST, FavorPolicy

logger = logging.getLogger("palette_breeder")


class WeightedTable:
    """[0, size) 정수 도메인 위의 이산 분포.

    아이템 i의 가중치는 ``weights[i]``에 그대로 들어 있고(인덱스 == 아이템),
    어떤 가중치도 1 아래로 내려가지 않는다. 도메인은 원형이라 양 끝이 이어진다.
    rng는 ``random()``으로 [0, 1) 실수를 주는 객체면 된다.
    """

    def __init__(
        self,
        size: int,
        policy: FavorPolicy = DECAY_THEN_BOOST,
        rng=None,
        prior: Optional[Sequence[int]] = None,
        name: str = "",
    ):
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size <= 0:
            raise ValueError(f"테이블 크기는 1 이상의 정수여야 해: {size!r}")
        if prior is None:
            weights = np.ones(int(size), dtype=np.int64)
        else:
            weights = np.array(prior, dtype=np.int64)
            if weights.shape != (size,):
                raise ValueError(f"prior 길이({weights.size})가 테이블 크기({size})와 달라.")
            if weights.min() < 1:
                raise ValueError("prior 가중치는 모두 1 이상이어야 해.")
        self._weights = weights
        self.policy = policy
        self.rng = rng if rng is not None else np.random.default_rng()
        self.name = name

    def __len__(self) -> int:
        return int(self._weights.size)

    def __repr__(self) -> str:
        return f"WeightedTable({self.name or len(self)!r}, total={self.total})"

    @property
    def weights(self) -> np.ndarray:
        return self._weights.copy()

    @property
    def total(self) -> int:
        return int(self._weights.sum())

    def weight(self, item: int) -> int:
        self._check_item(item)
        return int(self._weights[item])

    def probabilities(self) -> np.ndarray:
        return self._weights / self._weights.sum()

    def _check_item(self, item: int) -> None:
        assert 0 <= item < len(self), f"{self.name or 'table'}: 아이템 {item}이 도메인 [0, {len(self)}) 밖이야."

    def sample(self) -> int:
        # r이 (누적 이전, 누적 이후] 구간에 들어가는 아이템을 고른다
        cumulative = np.cumsum(self._weights)
        r = self.rng.random() * cumulative[-1]
        return int(np.searchsorted(cumulative, r, side="left"))

    def neighbor(self, item: int, distance: int) -> int:
        self._check_item(item)
        return (item + distance) % len(self)

    def favor(self, item: int, rate: Optional[int] = None, spread: Optional[int] = None) -> None:
        """item과 양옆 spread개 이웃을 거리에 따라 선형으로 줄어드는 양만큼 강화한다.

        감쇠 정책이면 먼저 모든 가중치를 max(1, w // 2)로 줄인다.
        감쇠 없는 정책에서는 꼬리 쪽 증가량이 0 이하가 될 수 있고,
        그때 가중치는 1에서 멈춘다.
        """
        self._check_item(item)
        rate = self.policy.rate if rate is None else rate
        spread = self.policy.spread if spread is None else spread
        if rate < 0 or spread < 0:
            raise ValueError("rate/spread는 0 이상이어야 해.")

        if self.policy.decay:
            np.maximum(self._weights // 2, 1, out=self._weights)
            self._weights[item] += rate * spread
            increments = [rate * (spread - k + 1) for k in range(1, spread + 1)]
        else:
            self._weights[item] += spread
            increments = [rate * spread - (k - 1) for k in range(1, spread + 1)]

        for k, amount in enumerate(increments, start=1):
            for distance in (-k, k):
                near = self.neighbor(item, distance)
                self._weights[near] = max(1, self._weights[near] + amount)

        assert self._weights.min() >= 1, f"{self.name or 'table'}: 가중치가 1 아래로 내려갔어."
        logger.debug(
            "[favor] %s item=%d rate=%d spread=%d decay=%s",
            self.name or "table",
            item,
            rate,
            spread,
            self.policy.decay,
        )
