"""
Quantum engine: builds a circuit, puts qubits in superposition,
measures them in alternating bases, and returns raw bitstrings.
"""

from __future__ import annotations

import logging

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .errors import EntropySourceError

logger = logging.getLogger(__name__)

DEFAULT_NUM_QUBITS = 16


class QuantumEngine:
    """
    Runs a single-shot superposition circuit on the local simulator.
    """

    def __init__(self, num_qubits: int = DEFAULT_NUM_QUBITS) -> None:
        if num_qubits < 1:
            raise ValueError(f"num_qubits must be at least 1, got {num_qubits}")
        self.num_qubits = num_qubits
        self.backend = AerSimulator()

        # Ensure requested num_qubits does not exceed backend capability.
        max_qubits = getattr(self.backend, "num_qubits", None)
        if max_qubits is not None and num_qubits > max_qubits:
            raise EntropySourceError(
                f"num_qubits={num_qubits} exceeds backend limit ({max_qubits})"
            )

        self._circuit, self.measurement_basis = self._build_circuit()
        # Transpile once; every shot reuses the same circuit.
        self._compiled = transpile(self._circuit, self.backend)

    def _build_circuit(self) -> tuple[QuantumCircuit, list[str]]:
        """
        Prepare N qubits in |+>, then measure in alternating bases
        (Z, Y, Z, Y, ...). Both bases give a uniformly random outcome
        for |+>; an X-basis measurement would always read 0.
        """
        n = self.num_qubits
        measurement_basis: list[str] = []
        qc = QuantumCircuit(n, n)

        for i in range(n):
            qc.h(i)

        for i in range(n):
            if i % 2 == 1:
                # Y-basis: rotate with S-dagger then H.
                measurement_basis.append("Y")
                qc.sdg(i)
                qc.h(i)
            else:
                measurement_basis.append("Z")
            qc.measure(i, i)

        return qc, measurement_basis

    def get_raw_bits(self) -> list[int]:
        """
        Run the circuit once and return one bit per qubit, first qubit first.
        """
        result = self.backend.run(self._compiled, shots=1).result()
        counts = result.get_counts()

        # counts is a dict like {'0101...': 1}
        bitstring = next(iter(counts.keys()))

        # Qiskit orders bits as [q_(n-1) ... q_0]; reverse so index 0 is first qubit.
        bitstring = bitstring.replace(" ", "")[::-1]
        return [int(b) for b in bitstring]
