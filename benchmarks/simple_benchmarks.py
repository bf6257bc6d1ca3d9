from timeit import timeit

from doodle.printer import prn_str
from doodle.types import Environment, Frame, List, Map, Number, String, Symbol, SymbolKey, Vector


def _sample_form(width: int = 20, depth: int = 4):
    """A nested (defn ...) style form mixing lists, vectors and maps."""
    form = List([Symbol("+"), Number(1), Number(2.5)])
    for level in range(depth):
        form = List(
            [Symbol(f"f{level}"), Vector([Symbol("x"), String("y")])]
            + [form] * width
            + [Map([(SymbolKey("k"), form)])]
        )
    return form


# Environment lookup chain: binding at the root, many frames above it

def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    env = Environment().define(Symbol("answer"), Number(42))
    for _ in range(n_envs):
        env = env.extend()
    # Warmup
    for _ in range(1000):
        env.lookup("answer")
    # Timed
    return timeit(lambda: env.lookup("answer"), number=n_lookups)


def bench_printer(rounds: int = 20) -> float:
    form = _sample_form(width=4)
    prn_str(form)
    return timeit(lambda: prn_str(form), number=rounds)


def bench_equality(rounds: int = 20) -> float:
    a = _sample_form(width=4)
    b = _sample_form(width=4)
    assert a == b
    return timeit(lambda: a == b, number=rounds)


def bench_frame_assoc(n_keys: int = 10000) -> float:
    def build():
        frame = Frame()
        for i in range(n_keys):
            frame = frame.assoc(f"k{i}", i)
        return frame
    return timeit(build, number=1)


if __name__ == "__main__":
    print("Benchmark: environment lookup chain")
    print(f"  time: {bench_lookup_chain():.6f}s")
    print("Benchmark: prn_str on a nested form")
    print(f"  time: {bench_printer():.6f}s")
    print("Benchmark: structural equality on a nested form")
    print(f"  time: {bench_equality():.6f}s")
    print("Benchmark: Frame.assoc x 10000")
    print(f"  time: {bench_frame_assoc():.6f}s")
