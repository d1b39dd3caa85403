import os
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional
from article_indexer.errors import ConfigError

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / 'config' / 'config.yaml'

TRANSPORT_ERROR_POLICIES = ("abort", "collect")


def load_config(path = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
  """Load the YAML settings file (empty dict if the file is empty)"""
  try:
    with open(path, 'r', encoding='utf-8') as f:
      data = yaml.safe_load(f)
  except FileNotFoundError:
    raise ConfigError(f"Config file not found: {path}") from None
  except yaml.YAMLError as e:
    raise ConfigError(f"Config file {path} is not valid YAML: {e}") from e

  if data is None:
    return {}
  if not isinstance(data, dict):
    raise ConfigError(f"Config file {path} must contain a mapping at top level")
  return data


@dataclass(frozen=True)
class IndexerConfig:
  """Settings shared by the index provisioner and the concurrent indexer"""
  hosts: List[str] = field(default_factory=lambda: ["http://localhost:9200"])
  index_name: str = "testindex"
  request_timeout: Optional[float] = None
  # None means one worker per article
  max_concurrency: Optional[int] = None
  on_transport_error: str = "abort"
  show_progress: bool = True

  @classmethod
  def from_dict(
      cls,
      raw: Mapping[str, Any],
      env: Optional[Mapping[str, str]] = None) -> 'IndexerConfig':
    """Build from the raw YAML dict, applying ELASTICSEARCH_* overrides from env"""
    env = os.environ if env is None else env
    es_config = raw.get('elasticsearch') or {}
    indexing_config = raw.get('indexing') or {}

    hosts = es_config.get('hosts', ["http://localhost:9200"])
    if isinstance(hosts, str):
      hosts = [hosts]
    if env.get('ELASTICSEARCH_URL'):
      hosts = [env['ELASTICSEARCH_URL']]
    if not isinstance(hosts, list) or not hosts or not all(isinstance(h, str) and h for h in hosts):
      raise ConfigError("'elasticsearch.hosts' must be a non-empty list of URLs")

    index_name = env.get('ELASTICSEARCH_INDEX') or es_config.get('index_name', "testindex")
    if not isinstance(index_name, str) or not index_name.strip():
      raise ConfigError("'elasticsearch.index_name' must be a non-empty string")

    request_timeout = es_config.get('request_timeout')
    if request_timeout is not None:
      request_timeout = _positive_number('elasticsearch.request_timeout', request_timeout)

    max_concurrency = indexing_config.get('max_concurrency')
    if max_concurrency is not None:
      if isinstance(max_concurrency, bool) or not isinstance(max_concurrency, int) or max_concurrency < 0:
        raise ConfigError("'indexing.max_concurrency' must be a non-negative integer or null")
      if max_concurrency == 0:
        max_concurrency = None

    policy = indexing_config.get('on_transport_error', "abort")
    if policy not in TRANSPORT_ERROR_POLICIES:
      raise ConfigError(
        f"'indexing.on_transport_error' must be one of {', '.join(TRANSPORT_ERROR_POLICIES)}, got {policy!r}"
      )

    return cls(
      hosts = list(hosts),
      index_name = index_name,
      request_timeout = request_timeout,
      max_concurrency = max_concurrency,
      on_transport_error = policy,
      show_progress = bool(indexing_config.get('show_progress', True))
    )


def _positive_number(name: str, value: Any) -> float:
  if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
    raise ConfigError(f"'{name}' must be a positive number")
  return float(value)



# Automatically load when module is imported
CONFIG = load_config() if DEFAULT_CONFIG_PATH.exists() else {}
