# tcmodules

Ready-made container image definitions for integration tests.

Each module describes one service image: its name and pinned tag, the
environment it needs, the command it runs, the ports it exposes, how to tell
that it is ready, and any commands to run inside it once it has started.
The package has no dependencies beyond the standard library.

## Installation

```
pip install tcmodules
```

For running the test suite:

```
pip install "tcmodules[test]"
pytest
```

## Available images

| Module | Class | Service |
| --- | --- | --- |
| `tcmodules.clickhouse` | `ClickHouse` | ClickHouse analytics database |
| `tcmodules.cncf_distribution` | `CncfDistribution` | Container image registry |
| `tcmodules.cockroach_db` | `CockroachDb` | CockroachDB single node |
| `tcmodules.consul` | `Consul` | Consul |
| `tcmodules.dynamodb_local` | `DynamoDb` | DynamoDB Local |
| `tcmodules.elastic_search` | `ElasticSearch` | Elasticsearch, single node |
| `tcmodules.elasticmq` | `ElasticMq` | ElasticMQ (SQS-compatible queue) |
| `tcmodules.google_cloud_sdk_emulators` | `CloudSdk` | Bigtable, Datastore, Firestore, Pub/Sub and Spanner emulators |
| `tcmodules.k3s` | `K3s` | K3s lightweight Kubernetes |
| `tcmodules.kafka.apache` | `Kafka` | Apache Kafka in KRaft mode |
| `tcmodules.kafka.confluent` | `Kafka` | Confluent Kafka with an embedded ZooKeeper |
| `tcmodules.kwok` | `KwokCluster` | Kubernetes WithOut Kubelet |
| `tcmodules.localstack` | `LocalStack` | LocalStack |
| `tcmodules.mariadb` | `Mariadb` | MariaDB |
| `tcmodules.meilisearch` | `Meilisearch` | Meilisearch |
| `tcmodules.minio` | `MinIO` | MinIO object storage |
| `tcmodules.mongo` | `Mongo` | MongoDB, standalone or single-node replica set |
| `tcmodules.mosquitto` | `Mosquitto` | Mosquitto MQTT broker |

## Usage

Every image class derives from `tcmodules.core.Image`. An image has `name`
and `tag` properties and answers the same questions through these methods:
`ready_conditions()`, `env_vars()`, `cmd()`, `entrypoint()`,
`expose_ports()`, `mounts()` and `exec_after_start(state)`. Images are frozen
dataclasses; builder methods return a new image.

```python
from tcmodules.mongo import Mongo

mongo = Mongo.repl_set()
mongo.cmd()               # ["--replSet", "rs"]
mongo.ready_conditions()  # [WaitFor(kind=WaitKind.STDOUT, value="Waiting for connections")]
```

Images that take options:

```python
from tcmodules.consul import Consul
from tcmodules.meilisearch import Environment, LogLevel, Meilisearch

consul = Consul().with_local_config('{"datacenter": "dc-test"}')
consul.env_vars()   # {"CONSUL_LOCAL_CONFIG": '{"datacenter": "dc-test"}'}

search = (
    Meilisearch()
    .with_environment(Environment.PRODUCTION)
    .with_log_level(LogLevel.OFF)
    .with_master_key("secret")
)
search.env_vars()
# {"MEILI_NO_ANALYTICS": "true", "MEILI_MASTER_KEY": "secret",
#  "MEILI_ENV": "production", "MEILI_LOG_LEVEL": "OFF"}
```

`Environment.parse()` and `LogLevel.parse()` turn the exact text forms
(`"production"`, `"INFO"`, ...) back into members and raise `ValueError`
otherwise.

Command lines are iterable objects: `CockroachDbCmd`, `K3sCmd`,
`MinIOServerCmd` and `CloudSdkCmd`. Google Cloud SDK emulators are picked by
constructor:

```python
from tcmodules.google_cloud_sdk_emulators import CloudSdk

datastore = CloudSdk.datastore("test")
datastore.cmd()
# ["gcloud", "beta", "emulators", "datastore", "start",
#  "--project", "test", "--host-port", "0.0.0.0:8081"]
```

The Apache Kafka image uses the GraalVM-based `apache/kafka-native` by
default; `Kafka().with_jvm_image()` switches to `apache/kafka`.

### Commands run after start

Some images need a command run inside the container once host ports are
known. `ContainerState` maps container ports to host ports:

```python
from tcmodules.core import ContainerState
from tcmodules.kafka.confluent import KAFKA_PORT, Kafka

state = ContainerState({KAFKA_PORT: 49153})
[command] = Kafka().exec_after_start(state)
command.cmd[-1]   # "advertised.listeners=[PLAINTEXT://127.0.0.1:49153,BROKER://localhost:9092]"
```

`ContainerState.host_port_ipv4()` raises `ContainerError` for a port that is
not mapped.

### Adjusting a request

Any image can be turned into a `ContainerRequest` to override the tag, add
environment variables, map ports or change runtime settings:

```python
from tcmodules.localstack import LocalStack
from tcmodules.mariadb import Mariadb

request = LocalStack().with_env_var("SERVICES", "s3")
request.env_vars()   # {"SERVICES": "s3"}

older = Mariadb().with_tag("11.2.3")
older.tag            # "11.2.3"
```

`ContainerRequest` also offers `with_mapped_port(host_port, container_port)`,
`with_privileged(privileged)` and `with_userns_mode(mode)`.

### Ports and wait conditions

`tcmodules.core` holds the shared building blocks: `ContainerPort.tcp()` and
`ContainerPort.udp()` (a bare `int` is taken as TCP where a port is
expected), `WaitFor` (messages on stdout or stderr, fixed delays with
`millis()`, HTTP probes through `HttpWaitStrategy`), `ExecCommand` with
`CmdWaitFor`, and `Mount.bind_mount()`.

### K3s kube config

```python
import tempfile

from tcmodules.k3s import K3s

conf_dir = tempfile.mkdtemp()
k3s = K3s().with_conf_mount(conf_dir)
# once the cluster has written its config into conf_dir:
kube_config = k3s.read_kube_config()
```

`read_kube_config()` raises `ContainerError` if no directory is mounted.

## What the package does not do

The package only describes images. It has no container runtime client: it
does not pull images, start or stop containers, follow their logs, poll HTTP
endpoints or run the exec commands it describes. A harness that does those
things reads these descriptions and supplies the `ContainerState` of a
running container.