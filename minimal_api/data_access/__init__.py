# This file makes the 'data_access' directory a Python package.
# It also makes it easier to import the repositories from other modules.

from .administrador_repository import administrador_repo
from .veiculo_repository import veiculo_repo
