"""
pHash Calculator
Perceptual 64-bit image fingerprints and Hamming distance
"""

import sys


def print_hash(label, result):
    print(f"{label}")
    print(f"  pHash (hex):    {result.hex_digest}")
    print(f"  pHash (signed): {result.signed_value}")
    print(f"  Time:           {result.total_time_ms:.2f} ms")


def run_synthetic():
    """Hash the generated demo images and compare them pairwise."""
    from engines.distance import distance
    from engines.pipeline import get_calculator
    from utils.test_images import generate_demo_image

    calculator = get_calculator()
    results = {}
    for key in ["photo", "gradient", "checkerboard"]:
        result, _ = calculator.hash_pixels(generate_demo_image(key))
        results[key] = result
        print_hash(key, result)

    print("\n=== Distances ===")
    keys = list(results)
    for i, a in enumerate(keys):
        for b in keys[i + 1:]:
            d = distance(results[a].fingerprint, results[b].fingerprint)
            print(f"{a} / {b}: {d}")
    return 0


def run_cli(args):
    """Hash one image, or two images and print their distance."""
    from engines.distance import distance, is_similar
    from engines.pipeline import get_calculator

    if not args or args[0] == '--help':
        print("Usage: python main.py [-v] <image_path> [other_image_path]")
        print("       python main.py [-v] --synthetic")
        return 0

    if args[0] == '--synthetic':
        return run_synthetic()

    calculator = get_calculator()
    results = []
    for path in args[:2]:
        result = calculator.calculate_hash_result(path)
        if result is None:
            print(f"Could not hash: {path}", file=sys.stderr)
            return 1
        print_hash(path, result)
        results.append(result)

    if len(results) == 2:
        a, b = results[0].fingerprint, results[1].fingerprint
        d = distance(a, b)
        verdict = "similar" if is_similar(a, b) else "different"
        print("\n=== Comparison ===")
        print(f"Distance: {d} ({verdict})")
    return 0


def main(argv=None):
    from utils.logging_config import configure_logging

    args = list(sys.argv[1:] if argv is None else argv)
    verbose = '-v' in args
    if verbose:
        args.remove('-v')
    configure_logging("DEBUG" if verbose else "WARNING")
    return run_cli(args)


if __name__ == '__main__':
    sys.exit(main())
