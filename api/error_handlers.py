import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.currency import ValidationError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = 'Erro interno do servidor'


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(ValidationError)
	async def validation_error_handler(request: Request, exc: ValidationError):
		return JSONResponse(status_code=400, content={'error': str(exc)})

	@app.exception_handler(Exception)
	async def global_exception_handler(request: Request, exc: Exception):
		logger.error(f'Unhandled exception on {request.url.path}: {exc}', exc_info=True)
		return JSONResponse(status_code=500, content={'error': INTERNAL_ERROR_MESSAGE})
