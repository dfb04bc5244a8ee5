import timeit

from heapperm import ByteBuffer, HeapPermutor, PermuteIter

STRING = "ABCDEF"
NUMBER = 100_000


def main():
    # raw permute: step the engine over one buffer, no snapshots
    buffer = ByteBuffer(STRING.encode())
    permutor = HeapPermutor.for_container(buffer)
    raw = timeit.timeit(lambda: permutor.advance(buffer), number=NUMBER)

    # iter permute: one snapshot per pull; restarted whenever exhausted
    state = {"it": PermuteIter.from_value(STRING)}

    def pull():
        try:
            next(state["it"])
        except StopIteration:
            state["it"] = PermuteIter.from_value(STRING)

    pulled = timeit.timeit(pull, number=NUMBER)
    print(f"raw_permute: {raw / NUMBER * 1e9:.1f} ns/call")
    print(f"iter_permute: {pulled / NUMBER * 1e9:.1f} ns/call")


if __name__ == "__main__":
    main()
