import logging
import time
from typing import Callable

from fastapi import APIRouter, HTTPException, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute
from sqlalchemy.exc import DBAPIError, DisconnectionError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from bookshelf.constants.metrics import Constants
from bookshelf.metrics.statsd_client import statsd
from bookshelf.utils.exceptions import BookshelfException, StorageUnavailableException

logger = logging.getLogger("api")


def translate_exception(exc: Exception) -> BookshelfException:
    """Map an untyped exception onto the error hierarchy."""
    if isinstance(exc, (DisconnectionError, PoolTimeoutError)):
        return StorageUnavailableException()
    if isinstance(exc, DBAPIError) and exc.connection_invalidated:
        return StorageUnavailableException()
    return BookshelfException()


class MetricsAPIRoute(APIRoute):
    def get_route_handler(self) -> Callable:
        original_route_handler = super().get_route_handler()

        async def metrics_route_handler(request: Request) -> Response:
            route_path = request.scope["route"].path
            method = request.method
            client_ip = request.headers.get(
                "X-Forwarded-For", request.client.host if request.client else "unknown"
            )

            start_time = time.time()
            logger.info(f"Request | {method} | {request.url.path} | {client_ip}")

            try:
                response = await original_route_handler(request)
            except BookshelfException as e:
                self._log_failure(method, request.url.path, route_path, client_ip, start_time, e.status_code, e)
                raise
            except (HTTPException, RequestValidationError) as e:
                status_code = getattr(e, "status_code", 400)
                self._log_failure(method, request.url.path, route_path, client_ip, start_time, status_code, e)
                raise
            except Exception as e:
                translated = translate_exception(e)
                process_time_ms = (time.time() - start_time) * 1000
                logger.error(
                    f"Uncaught exception in request | {method} | {request.url.path} | {client_ip} | {str(e)} | {process_time_ms:.4f}ms",
                    exc_info=True,
                )
                self._log_metric(method, route_path, translated.status_code, process_time_ms, type(e).__name__)
                raise translated from e

            process_time_ms = (time.time() - start_time) * 1000
            logger.info(
                f"Response | {method} | {request.url.path} | {client_ip} | {response.status_code} | {process_time_ms:.4f}ms"
            )
            self._log_metric(method, route_path, response.status_code, process_time_ms)
            return response

        return metrics_route_handler

    def _log_failure(self, method, url_path, route_path, client_ip, start_time, status_code, exc):
        process_time_ms = (time.time() - start_time) * 1000
        logger.info(
            f"Response | {method} | {url_path} | {client_ip} | {status_code} | {process_time_ms:.4f}ms | {exc}"
        )
        self._log_metric(method, route_path, status_code, process_time_ms)

    def _log_metric(self, method, path, status_code, process_time_ms, error=None):
        tags = {
            Constants.Tag.METHOD: method,
            Constants.Tag.PATH: path,
            Constants.Tag.CODE: status_code,
        }
        statsd.timing(
            Constants.Metric.API_LATENCY,
            process_time_ms,
            Constants.Metric.HUNDRED_SAMPLING_RATE,
            tags,
        )
        statsd.increment(
            Constants.Metric.API_COUNT,
            Constants.Metric.INCREMENT_COUNT,
            Constants.Metric.HUNDRED_SAMPLING_RATE,
            tags,
        )
        if error:
            statsd.increment(
                Constants.Metric.API_ERROR,
                Constants.Metric.INCREMENT_COUNT,
                Constants.Metric.HUNDRED_SAMPLING_RATE,
                {**tags, Constants.Tag.ERROR: error},
            )


class MetricsRouter(APIRouter):
    def __init__(self, *args, **kwargs):
        kwargs["route_class"] = MetricsAPIRoute
        super().__init__(*args, **kwargs)
