"""State I/O for saving and loading bodies."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from euler_orbits.physics.body import Body


def save_state(
    bodies: Sequence[Body],
    output_path: str,
    metadata: Optional[Dict[str, Any]] = None
):
    """Save bodies to file.

    Args:
        bodies: Bodies to save (forces are not saved)
        output_path: Output file path (.npz or .json)
        metadata: Optional metadata dictionary
    """
    output_path = Path(output_path)

    if output_path.suffix == '.npz':
        save_dict = {
            'names': np.array([body.name for body in bodies]),
            'masses': np.array([body.mass for body in bodies], dtype=np.float64),
            'positions': np.array([body.position for body in bodies], dtype=np.float64),
            'velocities': np.array([body.velocity for body in bodies], dtype=np.float64),
        }
        if metadata:
            for key, value in metadata.items():
                if isinstance(value, (int, float, str)):
                    save_dict[f'metadata_{key}'] = value
        np.savez_compressed(output_path, **save_dict)

    elif output_path.suffix == '.json':
        # repr-exact floats survive the JSON round trip
        state_dict = {
            'bodies': [
                {
                    'name': body.name,
                    'mass': body.mass,
                    'position': body.position.tolist(),
                    'velocity': body.velocity.tolist(),
                }
                for body in bodies
            ],
            'metadata': metadata or {}
        }
        with open(output_path, 'w') as f:
            json.dump(state_dict, f, indent=2)

    else:
        raise ValueError(f"Unsupported file format: {output_path.suffix}. Use .npz or .json")


def load_state(input_path: str) -> Tuple[List[Body], Dict[str, Any]]:
    """Load bodies from file.

    Args:
        input_path: Input file path

    Returns:
        Tuple of (bodies, metadata)
    """
    input_path = Path(input_path)

    if input_path.suffix == '.npz':
        with np.load(input_path) as data:
            bodies = [
                Body(str(name), float(mass), position=position, velocity=velocity)
                for name, mass, position, velocity in zip(
                    data['names'], data['masses'], data['positions'], data['velocities']
                )
            ]
            metadata = {}
            for key in data.keys():
                if key.startswith('metadata_'):
                    metadata[key[9:]] = data[key].item()
        return bodies, metadata

    elif input_path.suffix == '.json':
        with open(input_path, 'r') as f:
            state_dict = json.load(f)

        bodies = [
            Body(entry['name'], entry['mass'], position=entry['position'], velocity=entry['velocity'])
            for entry in state_dict['bodies']
        ]
        return bodies, state_dict.get('metadata', {})

    else:
        raise ValueError(f"Unsupported file format: {input_path.suffix}. Use .npz or .json")
