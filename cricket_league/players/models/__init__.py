from .player_model import Player
