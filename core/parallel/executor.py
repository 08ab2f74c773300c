"""
core/parallel/executor.py - 동시 실행 수 제한 실행기

지연 생성되는 입력(iterable)을 소비하면서 최대 max_workers개의 작업만
동시에 실행(in-flight)되도록 제한합니다. ThreadPoolExecutor 기반이며,
결과는 완료 순서대로 반환되므로 입력 순서와 다를 수 있습니다.

주요 구성 요소:
- ParallelConfig: 병렬 실행 설정 (워커 수)
- BoundedExecutor: 동시 실행 수 제한 실행기
- bounded_map: 간편한 래퍼 함수

Example:
    from core.parallel import bounded_map

    pages = paginator.paginate()
    for record in bounded_map(convert, iter_descriptors(pages), max_workers=10):
        records.append(record)
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import TypeVar

from core.config import DEFAULT_MAX_WORKERS

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


@dataclass
class ParallelConfig:
    """병렬 실행 설정

    Attributes:
        max_workers: 최대 동시 실행 작업 수 (1~100, 1이면 순차 실행)
    """

    max_workers: int = DEFAULT_MAX_WORKERS

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        if self.max_workers > 100:
            self.max_workers = 100

    @property
    def is_sequential(self) -> bool:
        return self.max_workers == 1


class BoundedExecutor:
    """동시 실행 수 제한 실행기

    특징:
    - 입력은 필요할 때만 하나씩 꺼냄 (지연 소비)
    - 동시에 실행 중인 작업은 항상 max_workers개 이하
    - 결과는 완료 순서대로 yield (순서 보장 없음)
    - 결과 수집은 호출 스레드에서만 수행 (워커 스레드는 공유 상태에 쓰지 않음)

    입력 iterable에서 발생한 예외(예: 페이지 조회 실패)는 호출자에게 그대로
    전파되고, 아직 시작되지 않은 작업은 취소됩니다.

    Example:
        executor = BoundedExecutor(ParallelConfig(max_workers=10))
        results = list(executor.map(convert, descriptors))
    """

    def __init__(self, config: ParallelConfig | None = None):
        """초기화

        Args:
            config: 병렬 실행 설정 (None이면 기본값)
        """
        self.config = config or ParallelConfig()

    def map(self, func: Callable[[T], R], items: Iterable[T]) -> Iterator[R]:
        """items의 각 항목에 func를 적용하고 완료 순서대로 결과 반환

        Args:
            func: 항목 하나를 받아 결과를 반환하는 함수
            items: 입력 iterable (지연 소비)

        Yields:
            func 실행 결과 (완료 순서)
        """
        if self.config.is_sequential:
            for item in items:
                yield func(item)
            return

        max_workers = self.config.max_workers
        start_time = time.monotonic()
        completed = 0

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            iterator = iter(items)
            pending: set[Future[R]] = set()
            exhausted = False

            try:
                while True:
                    # 빈 슬롯만큼 다음 입력 제출
                    while not exhausted and len(pending) < max_workers:
                        try:
                            item = next(iterator)
                        except StopIteration:
                            exhausted = True
                            break
                        pending.add(executor.submit(func, item))

                    if not pending:
                        break

                    done, pending = wait(pending, return_when=FIRST_COMPLETED)
                    for future in done:
                        completed += 1
                        yield future.result()
            finally:
                for future in pending:
                    future.cancel()

        logger.debug(
            f"병렬 실행 완료: {completed}개 작업, max_workers={max_workers}, "
            f"총 {(time.monotonic() - start_time) * 1000:.0f}ms"
        )


def bounded_map(
    func: Callable[[T], R],
    items: Iterable[T],
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> Iterator[R]:
    """BoundedExecutor 편의 함수

    Args:
        func: 항목 하나를 받아 결과를 반환하는 함수
        items: 입력 iterable (지연 소비)
        max_workers: 최대 동시 실행 수 (1이면 순차 실행)

    Returns:
        완료 순서대로 결과를 내는 iterator
    """
    return BoundedExecutor(ParallelConfig(max_workers=max_workers)).map(func, items)
