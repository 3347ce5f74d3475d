from .gateway import ApiGateway, ApiError
from .service import ApiService
