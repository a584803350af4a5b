"""Minimal example showing how to assemble overlapping reads."""

from __future__ import annotations

import random

from sequencer import Assembler, AssemblerConfig, Fragment


def main() -> None:
    rng = random.Random(1234)
    genome = "".join(rng.choice("GCAT") for _ in range(60))
    reads = [Fragment(genome[start : start + 15]) for start in range(0, 46, 5)]
    rng.shuffle(reads)

    config = AssemblerConfig(tie_break="shortest", scan_mode="thread", num_workers=2)
    assembler = Assembler(reads, config=config)

    for step in assembler.stream():
        print(
            f"Step {step.step}: merged {step.left}+{step.right}"
            f" overlap={step.overlap} pool={step.pool_size}"
        )

    print("State:", assembler.state.value)
    for fragment in assembler.fragments:
        print(fragment)
    print("Matches genome:", [str(f) for f in assembler.fragments] == [genome])


if __name__ == "__main__":
    main()
