"""
tests/core/parallel/test_executor.py - BoundedExecutor 테스트
"""

import threading
import time

import pytest

from core.config import DEFAULT_MAX_WORKERS, Settings
from core.parallel import executor
from core.parallel.executor import BoundedExecutor, ParallelConfig, bounded_map


class TestParallelConfig:
    """ParallelConfig 테스트"""

    def test_default_values(self):
        """기본값 확인"""
        config = ParallelConfig()

        assert config.max_workers == DEFAULT_MAX_WORKERS == 10
        assert config.is_sequential is False

    def test_default_shared_with_settings(self):
        """실행기 기본값은 core.config 설정값을 그대로 사용"""
        assert executor.DEFAULT_MAX_WORKERS is DEFAULT_MAX_WORKERS
        assert ParallelConfig().max_workers == Settings().max_workers

    def test_single_worker_is_sequential(self):
        assert ParallelConfig(max_workers=1).is_sequential is True

    @pytest.mark.parametrize("value", [0, -1])
    def test_invalid_max_workers(self, value):
        """1 미만은 ValueError"""
        with pytest.raises(ValueError):
            ParallelConfig(max_workers=value)

    def test_max_workers_capped(self):
        """최대 100으로 제한"""
        assert ParallelConfig(max_workers=500).max_workers == 100


class _InFlightCounter:
    """동시 실행 중인 작업 수를 추적하는 테스트 함수"""

    def __init__(self, delay: float = 0.01):
        self.delay = delay
        self.current = 0
        self.peak = 0
        self._lock = threading.Lock()

    def __call__(self, item):
        with self._lock:
            self.current += 1
            self.peak = max(self.peak, self.current)
        time.sleep(self.delay)
        with self._lock:
            self.current -= 1
        return item * 2


class TestBoundedExecutor:
    """BoundedExecutor.map 테스트"""

    def test_all_results_returned(self):
        """모든 항목의 결과 반환 (순서 무관)"""
        results = list(bounded_map(lambda x: x * 2, range(50), max_workers=10))

        assert sorted(results) == [x * 2 for x in range(50)]

    @pytest.mark.parametrize("max_workers", [2, 5, 10])
    def test_in_flight_never_exceeds_limit(self, max_workers):
        """동시 실행 작업 수는 max_workers 이하"""
        counter = _InFlightCounter()

        results = list(bounded_map(counter, range(40), max_workers=max_workers))

        assert len(results) == 40
        assert 1 <= counter.peak <= max_workers

    def test_sequential_preserves_order(self):
        """max_workers=1이면 호출 스레드에서 입력 순서대로 실행"""
        threads = set()

        def func(item):
            threads.add(threading.get_ident())
            return item

        results = list(BoundedExecutor(ParallelConfig(max_workers=1)).map(func, [3, 1, 2]))

        assert results == [3, 1, 2]
        assert threads == {threading.get_ident()}

    def test_empty_input(self):
        assert list(bounded_map(lambda x: x, [], max_workers=4)) == []

    def test_input_consumed_lazily(self):
        """입력은 빈 슬롯이 생길 때만 꺼냄"""
        pulled = []

        def items():
            for i in range(20):
                pulled.append(i)
                yield i

        gen = bounded_map(lambda x: x, items(), max_workers=3)
        first = next(gen)

        # 첫 결과 시점에는 최대 max_workers개만 꺼낸 상태
        assert first in (0, 1, 2)
        assert len(pulled) == 3

        rest = list(gen)
        assert len(pulled) == 20
        assert sorted([first, *rest]) == list(range(20))

    @pytest.mark.parametrize("max_workers", [1, 4])
    def test_input_error_propagates(self, max_workers):
        """입력 iterable 예외는 호출자에게 전파"""

        def items():
            yield 1
            yield 2
            raise RuntimeError("page fetch failed")

        with pytest.raises(RuntimeError, match="page fetch failed"):
            list(bounded_map(lambda x: x, items(), max_workers=max_workers))

    @pytest.mark.parametrize("max_workers", [1, 4])
    def test_func_error_propagates(self, max_workers):
        """작업 함수 예외는 결과 수집 시 전파"""

        def func(item):
            if item == 3:
                raise ValueError("bad item")
            return item

        with pytest.raises(ValueError, match="bad item"):
            list(bounded_map(func, range(10), max_workers=max_workers))

    def test_default_config(self):
        assert BoundedExecutor().config.max_workers == DEFAULT_MAX_WORKERS
