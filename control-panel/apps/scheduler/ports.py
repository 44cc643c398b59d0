"""Port resolution for container image workloads."""

from typing import Any, Dict, List, Optional, Sequence, Union
import json

from .exceptions import InvalidExecutionMetadata, NoTcpPortsError


def parse_execution_metadata(execution_metadata: Union[str, Dict[str, Any], None]) -> Dict[str, Any]:
    """
    Decode image execution metadata.

    Raises:
        InvalidExecutionMetadata: If the metadata is not a JSON object
    """
    if not execution_metadata:
        return {}
    if isinstance(execution_metadata, dict):
        return execution_metadata
    try:
        metadata = json.loads(execution_metadata)
    except ValueError as exc:
        raise InvalidExecutionMetadata(f"Execution metadata is not valid JSON: {exc}") from exc
    if not isinstance(metadata, dict):
        raise InvalidExecutionMetadata('Execution metadata must be a JSON object')
    return metadata


class PortResolver:
    """Works out which ports a container image workload exposes."""

    def __init__(self, default_port: int = 8080):
        self.default_port = default_port

    def resolve(self, explicit_ports: Optional[Sequence[int]],
                execution_metadata: Union[str, Dict[str, Any], None]) -> List[int]:
        """
        Ports to expose, in order.

        Explicit ports always win. Otherwise the ports declared with
        protocol ``tcp`` in the image metadata are used, keeping their
        order; metadata without ports means the default port.

        Raises:
            NoTcpPortsError: If the metadata declares ports but none are TCP
            InvalidExecutionMetadata: If the declared ports are malformed
        """
        if explicit_ports:
            return list(explicit_ports)

        declared = parse_execution_metadata(execution_metadata).get('ports') or []
        if not declared:
            return [self.default_port]
        if not isinstance(declared, list) or not all(isinstance(entry, dict) for entry in declared):
            raise InvalidExecutionMetadata('Execution metadata ports must be a list of objects')

        tcp_ports = []
        for entry in declared:
            if entry.get('protocol') != 'tcp':
                continue
            try:
                tcp_ports.append(int(entry['port']))
            except (KeyError, TypeError, ValueError) as exc:
                raise InvalidExecutionMetadata(f"Invalid port entry in execution metadata: {entry}") from exc

        if not tcp_ports:
            raise NoTcpPortsError('No tcp ports found in image metadata')
        return tcp_ports
