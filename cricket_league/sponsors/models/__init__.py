from .sponsor_model import Sponsor
