from .team_model import Team
from .team_sponsor_model import TeamSponsor
