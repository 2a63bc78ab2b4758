import logging, typing, random, aioconsole
from . import log
from .state import CubeState
from .moves import Move, parse_move, random_moves
from .facelets import FACELET_ORDER
from .session import CubeSession
from .errors import CubeError

HELP_TEXT = [
    "(h)elp:          Shows this help text",
    "(q)uit:          Exits the console",
    "(r)eset:         Resets the cube to the solved state",
    "(m)ove <moves>:  Applies moves, e.g. m R U R' U' (bare moves work too)",
    "(s)cramble [n]:  Applies n uniformly random moves (default 20)",
    "(v)alidate:      Checks the cube state invariants",
    "(p)rint:         Prints the facelets of every face",
    "(w)atch:         Toggles printing moves as they are applied",
    "(d)ebug:         Toggles debug logging"
]

def is_move_token(token: str) -> bool:
    try: parse_move(token)
    except CubeError: return False
    return True

class Console:
    session: CubeSession
    rng: random.Random

    _watch_cb: typing.Optional[typing.Callable[[CubeState, typing.Optional[Move]], None]]

    def __init__(self, session: CubeSession, rng: typing.Optional[random.Random] = None):
        self.session = session
        self.rng = rng or random.Random()
        self._watch_cb = None

    async def run_command(self, line: str) -> bool:
        tokens = line.split()
        if len(tokens) == 0: return True
        cmd, args = tokens[0].lower(), tokens[1:]

        try:
            #Move tokens are upper case, so they never clash with commands
            if is_move_token(tokens[0]):
                st = await self.session.apply_sequence(tokens)
                print(f"State: {st}")
                return True

            if cmd == "h" or cmd == "help":
                for l in HELP_TEXT: print(l)
            elif cmd == "q" or cmd == "quit":
                print("Exiting...")
                return False
            elif cmd == "r" or cmd == "reset":
                await self.session.reset()
                print("Cube reset")
            elif cmd == "m" or cmd == "move":
                st = await self.session.apply_sequence(args)
                print(f"State: {st}")
            elif cmd == "s" or cmd == "scramble":
                n = int(args[0]) if args else 20
                moves = random_moves(n, self.rng)
                await self.session.apply_sequence(moves)
                print(f"Scramble: {' '.join(map(str, moves))}")
            elif cmd == "v" or cmd == "validate":
                report = self.session.validate()
                print(f"{'VALID' if report.valid else 'INVALID'}: {report.describe()}")
            elif cmd == "p" or cmd == "print":
                self.print_snapshot()
            elif cmd == "w" or cmd == "watch":
                await self.toggle_watch()
            elif cmd == "d" or cmd == "debug":
                if log.LOGGER.level != logging.DEBUG:
                    log.LOGGER.setLevel(logging.DEBUG)
                    print("Enabled debug logging")
                else:
                    log.LOGGER.setLevel(logging.INFO)
                    print("Disabled debug logging")
            else: print("Unknown command")
        except CubeError as e: print(f"Error: {e}")
        except ValueError as e: print(f"Bad argument: {e}")

        return True

    async def toggle_watch(self):
        if self._watch_cb:
            await self.session.unregister_handler(self._watch_cb)
            self._watch_cb = None
            print("Stopped watching moves")
        else:
            def watch_cb(state: CubeState, move: typing.Optional[Move]):
                print(f"MOVE | {state} | {move if move else 'reset'}")
            self._watch_cb = watch_cb
            await self.session.register_handler(watch_cb)
            print("Watching moves")

    def print_snapshot(self):
        snap = self.session.snapshot()
        for face in FACELET_ORDER:
            print(f"--- {face.name} ---")
            for row in snap.face_grid(face): print(" ".join(c.value for c in row))
        print(f"solved: {self.session.cur_state.is_solved}")

    async def command_loop(self):
        while await self.run_command(await aioconsole.ainput("> ")): pass
