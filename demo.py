import asyncio, logging, argparse, random, cubecore
from cubecore.console import Console

logging.basicConfig(level=logging.INFO)

parser = argparse.ArgumentParser()
parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
parser.add_argument("--strict", action="store_true", help="Validate the cube state after every move")
parser.add_argument("--seed", type=int, default=None, help="Seed for scrambles")
args = parser.parse_args()

if args.debug: cubecore.LOGGER.setLevel(logging.DEBUG)

async def main():
    session = cubecore.CubeSession(strict=args.strict)
    console = Console(session, random.Random(args.seed))

    print("Virtual 3x3x3 cube, type 'h' for help")
    await console.command_loop()

    print(f"Applied {session.num_moves} moves since the last reset")

asyncio.run(main())
