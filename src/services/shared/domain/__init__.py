from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .exception import (
    AccessDeniedException as AccessDeniedException,
)
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    OptimisticLockException as OptimisticLockException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exception import (
    UnsupportedStateException as UnsupportedStateException,
)
from .repository import Repository as Repository
from .value_object import (
    IsoDateTime as IsoDateTime,
)
from .value_object import (
    ItemId as ItemId,
)
from .value_object import (
    UserId as UserId,
)
