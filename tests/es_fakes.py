"""Elasticsearch response and error objects for mocked clients."""

from elastic_transport import ApiResponseMeta, HeadApiResponse, HttpHeaders, NodeConfig, ObjectApiResponse
from elasticsearch import ApiError, ConnectionError

NODE = NodeConfig("http", "localhost", 9200)


def meta(status: int) -> ApiResponseMeta:
  return ApiResponseMeta(
    status = status,
    http_version = "1.1",
    headers = HttpHeaders(),
    duration = 0.0,
    node = NODE
  )


def head_response(status: int) -> HeadApiResponse:
  return HeadApiResponse(meta = meta(status))


def object_response(body: dict, status: int = 200) -> ObjectApiResponse:
  return ObjectApiResponse(body = body, meta = meta(status))


def index_ack(doc_id: str, version: int = 1, result: str = "created") -> ObjectApiResponse:
  status = 201 if result == "created" else 200
  return object_response({
    "_index": "testindex",
    "_id": doc_id,
    "_version": version,
    "result": result,
    "forced_refresh": True
  }, status = status)


def api_error(status: int, message: str = "mapper_parsing_exception") -> ApiError:
  return ApiError(message, meta(status), {"error": {"type": message}, "status": status})


def connection_error() -> ConnectionError:
  return ConnectionError("Connection refused")
