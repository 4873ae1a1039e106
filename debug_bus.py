import sys, os, random, logging
ROOT=os.path.dirname(__file__); SRC=os.path.join(ROOT,'src');
if SRC not in sys.path: sys.path.insert(0,SRC)
from lines.events import bus as events
from lines.game import LinesGame

logging.basicConfig(level=logging.INFO, format='%(name)s: %(message)s')

EVENT_NAMES=[value for key, value in vars(events).items() if key.startswith('EVENT_')]

def trace(name):
    def handler(sender, **payload):
        print(f'[{name}]', payload)
    return handler

game=LinesGame(event_bus=events.EventBus(), rng=random.Random(int(sys.argv[1]) if len(sys.argv)>1 else 0))
for name in EVENT_NAMES: game.event_bus.subscribe(name, trace(name))
print('Signals', game.event_bus.event_names())

rng=random.Random(1)
clicks=0
while not game.engine.is_game_over and clicks<2000:
    occupied=[coord for coord, _ in game.engine.snapshot()]
    free=game.engine.tile_map.free_coordinates()
    if not occupied or not free: break
    origin=rng.choice(occupied); target=rng.choice(free)
    game.click(origin.col, origin.row); game.click(target.col, target.row)
    clicks+=1
print('Clicks', clicks, 'score', game.engine.score, 'balls', len(game.engine.snapshot()))
