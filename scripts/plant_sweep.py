#!/usr/bin/env python3
"""Daily power curve of fixed-orientation plant layouts.

Sweeps the Sun across the sky and compares a plant with all modules
facing the same way against one arranged to flatten the output curve.
"""

import argparse
import logging
from pathlib import Path

import numpy as np

from pvplant.config import load_config, set_config
from pvplant.power import LightSource, ModuleMount, PhotovoltaicModule, Plant, PLANT_CAPACITY
from pvplant.simulation import SweepResult, flattened_plant, run_sweep


def print_stream(result: SweepResult) -> None:
    """Print "(single mount power; plant output)" per sample."""
    for _, probe_power, output in result.rows():
        print(f"{probe_power:.2f}; {output:.2f}")


def print_summary(name: str, result: SweepResult) -> None:
    """Print curve statistics."""
    print(f"{name}:")
    print(f"  Samples: {len(result.outputs)}")
    print(f"  Energy: {result.total_energy():.1f} W*rad")
    print(f"  Peak output: {result.peak_output():.1f} W")
    print(f"  Mean output: {result.mean_output():.1f} W")
    print(f"  Output std: {result.output_std():.1f} W")


def main():
    parser = argparse.ArgumentParser(description="Daily power curve of solar plant layouts")
    parser.add_argument("--config", type=Path, default=None, help="Config JSON file")
    parser.add_argument("--step", type=float, default=None, help="Sun step per sample (rad)")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--plot", action="store_true", help="Plot power curves")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.config is not None:
        set_config(load_config(args.config))

    # Single mount facing -pi/2 with a 2x3 module
    test_mount = ModuleMount(-np.pi / 2, PhotovoltaicModule(10, 10))
    test_mount.resize_module(2, 3)
    print(f"{test_mount.current_power(np.pi / 2):.2f}; {test_mount.efficiency(np.pi):.2f}")
    print()

    sun = LightSource()
    uniform = Plant()
    for index in range(PLANT_CAPACITY):
        uniform.install_mount(test_mount, index)

    print("Single mount power; plant output")
    uniform_result = run_sweep(uniform, sun, step=args.step, probe=test_mount)
    print_stream(uniform_result)
    print()

    flat = flattened_plant()
    for index in (0, 1, 2, 3):
        flat.resize_module(index, 10, 10)
    print("Flattened plant:")
    for line in flat.report():
        print(f"  {line}")
    print()

    flat_result = run_sweep(flat, sun, step=args.step)
    for angle, _, output in flat_result.rows():
        print(f"Sun position: {angle:.4f}; Current output: {output:.2f}")
    print()

    print("=" * 60)
    print_summary("Uniform plant", uniform_result)
    print()
    print_summary("Flattened plant", flat_result)
    print("=" * 60)

    if args.plot:
        try:
            import matplotlib.pyplot as plt

            plt.figure(figsize=(12, 6))
            plt.plot(uniform_result.angles, uniform_result.outputs, label="Uniform plant")
            plt.plot(flat_result.angles, flat_result.outputs, label="Flattened plant")
            plt.xlabel('Sun angle (rad)')
            plt.ylabel('Plant output (W)')
            plt.title('Plant output over the day')
            plt.grid(True)
            plt.legend()
            plt.savefig('plant_output.png', dpi=150)
            print("\nPlot saved to plant_output.png")
        except ImportError:
            print("\nNote: matplotlib not installed, skipping plot")


if __name__ == "__main__":
    main()
