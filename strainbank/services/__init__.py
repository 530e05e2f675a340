from strainbank.services.base import Creatable, Deletable, EntityService, Retrievable
from strainbank.services.batch_service import BatchService
from strainbank.services.grower_service import GrowerService
from strainbank.services.strain_service import StrainService
from strainbank.services.terpenes_service import TerpenesService

__all__ = [
	"BatchService",
	"Creatable",
	"Deletable",
	"EntityService",
	"GrowerService",
	"Retrievable",
	"StrainService",
	"TerpenesService",
]
