from strainbank.schemas.batch import (
	BatchBuilder,
	BatchCreate,
	BatchRead,
	BatchResponse,
	TerpenesBuilder,
	TerpenesCreate,
	TerpenesRead,
)
from strainbank.schemas.catalog import GrowerCreate, GrowerRead, StrainCreate, StrainRead

__all__ = [
	"BatchBuilder",
	"BatchCreate",
	"BatchRead",
	"BatchResponse",
	"GrowerCreate",
	"GrowerRead",
	"StrainCreate",
	"StrainRead",
	"TerpenesBuilder",
	"TerpenesCreate",
	"TerpenesRead",
]
