from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List


class FrequencyCounter:
    """Symbol frequency counter for raw text.

    Only symbols below ``SYMBOL_LIMIT`` are counted; bytes with the high bit
    set are skipped without error.

    :ivar SYMBOL_LIMIT: First byte value that is excluded from counting.
    :type SYMBOL_LIMIT: int
    :ivar DEFAULT_WORKERS: Shard count used when ``parallel`` is enabled.
    :type DEFAULT_WORKERS: int
    :ivar parallel: Whether counting is sharded across worker threads.
    :type parallel: bool
    :ivar workers: Number of shards (and threads) for parallel counting.
    :type workers: int
    """

    SYMBOL_LIMIT = 128
    DEFAULT_WORKERS = 4

    def __init__(self, parallel: bool = False, workers: int = DEFAULT_WORKERS):
        """Configure the counter.

        :param parallel: Count shards of the input on a thread pool.
        :type parallel: bool
        :param workers: Number of shards/threads, must be at least 1.
        :type workers: int
        :returns: None
        :rtype: None
        :raises ValueError: If ``workers`` is less than 1.
        """
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        self.parallel = parallel
        self.workers = workers

    @classmethod
    def _count_shard(cls, shard: bytes) -> Counter:
        """Count countable symbols of a single shard.

        :param shard: Slice of the input.
        :type shard: bytes
        :returns: Partial counts for this shard.
        :rtype: Counter
        """
        return Counter(b for b in shard if b < cls.SYMBOL_LIMIT)

    def _shards(self, data: bytes) -> List[bytes]:
        size = -(-len(data) // self.workers)
        return [data[i:i + size] for i in range(0, len(data), size)]

    def count(self, data: bytes) -> Dict[int, int]:
        """Build the frequency table of ``data``.

        In parallel mode every worker fills its own counter and the partial
        counters are merged on the calling thread afterwards.

        :param data: Input text as bytes.
        :type data: bytes
        :returns: Mapping from symbol to occurrence count (always >= 1).
        :rtype: Dict[int, int]
        """
        if not self.parallel or self.workers == 1 or len(data) < self.workers:
            return dict(self._count_shard(data))

        total: Counter = Counter()
        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            for partial in pool.map(self._count_shard, self._shards(data)):
                total.update(partial)
        return dict(total)


def bucket_frequencies(frequencies: Dict[int, int]) -> Dict[int, List[int]]:
    """Group symbols by their count.

    Keys are ascending counts, and each bucket lists its symbols in
    ascending order, so walking the result is independent of dict order.

    :param frequencies: Mapping from symbol to count.
    :type frequencies: Dict[int, int]
    :returns: Mapping from count to the sorted symbols sharing it.
    :rtype: Dict[int, List[int]]
    """
    buckets: Dict[int, List[int]] = {}
    for symbol, freq in frequencies.items():
        buckets.setdefault(freq, []).append(symbol)
    return {freq: sorted(buckets[freq]) for freq in sorted(buckets)}
