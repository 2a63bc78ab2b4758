import logging, argparse, sys, cubecore

logging.basicConfig(level=logging.INFO)

parser = argparse.ArgumentParser(description="Applies random moves and validates the cube state after each one")
parser.add_argument("-n", "--iterations", type=int, default=1_000_000, help="Number of random moves")
parser.add_argument("-i", "--interval", type=int, default=100_000, help="Progress log interval")
parser.add_argument("-s", "--seed", type=int, default=None, help="Random seed")
parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
args = parser.parse_args()

if args.debug: cubecore.LOGGER.setLevel(logging.DEBUG)

config = cubecore.FuzzConfig(iterations=args.iterations, check_interval=args.interval, seed=args.seed)
try:
    result = cubecore.run_random_walk(config)
except cubecore.CorruptedState as e:
    print(f"FAILURE: {e}")
    sys.exit(1)

print(f"Verified {result.moves_applied} moves without corruption in {result.elapsed:.2f}s ({result.moves_per_second:.0f} moves/s)")
print(f"Final state: {result.final_state}")
