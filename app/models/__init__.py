from .club import Club
from .email_template import EmailTemplate
from .fixture import Fixture
from .pitch import Pitch
from .team import Team, TeamOfficial
from .team_import import TeamImport, TeamImportSession
from .user_column_mapping import UserColumnMapping
from .user import User
