"""Saving and loading body states (.npz or .json).

Arrays are stored under 'positions', 'velocities' and 'masses'; body names
travel with them so a saved run can be restarted with the same identities.
"""

import numpy as np
import json
from typing import Tuple, Dict, Any, List, Optional, Sequence
from pathlib import Path
from nbody_sim.physics.body import Body
from nbody_sim.physics.nbody import NBodySystem

StateTuple = Tuple[np.ndarray, np.ndarray, np.ndarray, Dict[str, Any]]


def _write_npz(path: Path, arrays: Dict[str, np.ndarray], names, metadata):
    payload = dict(arrays)
    if names is not None:
        payload['names'] = np.array(list(names), dtype=str)
    # npz holds arrays only; non-scalar metadata is dropped
    for key, value in metadata.items():
        if isinstance(value, (int, float, str)):
            payload[f'metadata_{key}'] = value
    np.savez_compressed(path, **payload)


def _read_npz(path: Path) -> StateTuple:
    with np.load(path) as data:
        metadata = {
            key[len('metadata_'):]: data[key].item()
            for key in data.files
            if key.startswith('metadata_')
        }
        if 'names' in data.files:
            metadata['names'] = [str(n) for n in data['names']]
        return data['positions'], data['velocities'], data['masses'], metadata


def _write_json(path: Path, arrays: Dict[str, np.ndarray], names, metadata):
    document = {key: value.tolist() for key, value in arrays.items()}
    document['metadata'] = dict(metadata)
    if names is not None:
        document['names'] = list(names)
    with open(path, 'w') as f:
        json.dump(document, f, indent=2)


def _read_json(path: Path) -> StateTuple:
    with open(path, 'r') as f:
        document = json.load(f)
    metadata = document.get('metadata', {})
    if 'names' in document:
        metadata['names'] = list(document['names'])
    arrays = [np.array(document[key], dtype=np.float64) for key in ('positions', 'velocities', 'masses')]
    return arrays[0], arrays[1], arrays[2], metadata


_FORMATS = {
    '.npz': (_write_npz, _read_npz),
    '.json': (_write_json, _read_json),
}


def _format_for(path: Path):
    try:
        return _FORMATS[path.suffix]
    except KeyError:
        raise ValueError(f"Unsupported file format: {path.suffix}. Use .npz or .json") from None


def save_state(
    positions: np.ndarray,
    velocities: np.ndarray,
    masses: np.ndarray,
    output_path: str,
    metadata: Optional[Dict[str, Any]] = None,
    names: Optional[Sequence[str]] = None
):
    """Save simulation state to file.

    Args:
        positions: Body positions (n, 3)
        velocities: Body velocities (n, 3)
        masses: Body masses (n,)
        output_path: Output file path (.npz or .json)
        metadata: Optional metadata dictionary (scalars only for .npz)
        names: Optional body names
    """
    output_path = Path(output_path)
    writer, _ = _format_for(output_path)
    arrays = {
        'positions': np.asarray(positions),
        'velocities': np.asarray(velocities),
        'masses': np.asarray(masses),
    }
    writer(output_path, arrays, names, metadata or {})


def load_state(input_path: str) -> StateTuple:
    """Load simulation state from file.

    Body names, if present, are returned under metadata['names'].

    Returns:
        Tuple of (positions, velocities, masses, metadata)
    """
    input_path = Path(input_path)
    _, reader = _format_for(input_path)
    return reader(input_path)


def save_system(system: NBodySystem, output_path: str, metadata: Optional[Dict[str, Any]] = None):
    """Save the live state of a system together with its body names."""
    positions, velocities, masses = system.get_state()
    save_state(positions, velocities, masses, output_path, metadata, names=system.names)


def load_bodies(input_path: str) -> Tuple[List[Body], Dict[str, Any]]:
    """Load a saved state as Body records ready for Simulator.initialize.

    Bodies saved without names get index-based ones.

    Raises:
        InvalidBodyError: If the file holds a non-positive mass or bad vectors
    """
    positions, velocities, masses, metadata = load_state(input_path)
    names = metadata.get('names') or [f"body{i}" for i in range(len(masses))]
    bodies = [
        Body(mass=masses[i], position=positions[i], velocity=velocities[i], name=names[i])
        for i in range(len(masses))
    ]
    return bodies, metadata
