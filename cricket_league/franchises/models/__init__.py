from .franchise_model import Franchise
