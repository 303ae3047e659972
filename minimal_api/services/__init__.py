from .administrador_service import AdministradorService
from .interfaces import AdministradorServicoProtocol, VeiculoServicoProtocol
from .validation import validate_veiculo
from .veiculo_service import VeiculoService
