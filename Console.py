import sys
import threading

COMMANDS = {
    "pause": "toggle pause",
    "step": "run a single tick while paused",
    "close": "stop reading commands",
}


def handle_command(simulation, command):
    '''
        Applies one console command. Returns False once the reader should stop.
    '''
    command = command.strip().lower()
    if command == "pause":
        simulation.toggle_pause()
        print("Paused" if simulation.paused else "Resumed")
    elif command == "step":
        simulation.step()
    elif command == "close":
        return False
    elif command:
        print("Commands: " + ", ".join(f"{k} ({v})" for k, v in COMMANDS.items()))
    return True


class InputThread(threading.Thread):
    '''
        Reads commands from the console for the duration of the program.
        Only touches the simulation through its pause and step flags.
    '''
    def __init__(self, simulation, stream=None) -> None:
        super().__init__(name="console", daemon=True)
        self.simulation = simulation
        self.stream = stream if stream is not None else sys.stdin

    def run(self):
        for line in self.stream:
            if not handle_command(self.simulation, line):
                break
