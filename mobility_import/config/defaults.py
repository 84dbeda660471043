"""Built-in vocabularies for the mobility form.

These are the tables used when no configuration file is given. Alias keys
are written lowercase; accents are optional because comparison folds them.
"""

from typing import Dict, List

from mobility_import.domain.models import FieldKey, MobilityType

FIELD_ALIASES: Dict[str, str] = {
    # Start date
    "fecha inicio": FieldKey.START_DATE.value,
    "fecha": FieldKey.START_DATE.value,
    "date": FieldKey.START_DATE.value,
    "fecha documento": FieldKey.START_DATE.value,
    "start date": FieldKey.START_DATE.value,
    # End date
    "fecha fin": FieldKey.END_DATE.value,
    "fecha final": FieldKey.END_DATE.value,
    "end date": FieldKey.END_DATE.value,
    # Location
    "ubicación": FieldKey.LOCATION.value,
    "delegación": FieldKey.LOCATION.value,
    "location": FieldKey.LOCATION.value,
    # Full name
    "nombre y apellidos": FieldKey.FULL_NAME.value,
    "nombre completo": FieldKey.FULL_NAME.value,
    "nombre": FieldKey.FULL_NAME.value,
    "full name": FieldKey.FULL_NAME.value,
    # GPID
    "gpid": FieldKey.GPID.value,
    "employee id": FieldKey.GPID.value,
    "id empleado": FieldKey.GPID.value,
    # Temporary position
    "título y código del puesto": FieldKey.TEMPORARY_POSITION.value,
    "puesto temporal": FieldKey.TEMPORARY_POSITION.value,
    "temporary position": FieldKey.TEMPORARY_POSITION.value,
    "puesto": FieldKey.TEMPORARY_POSITION.value,
    # Original position
    "puesto original": FieldKey.ORIGINAL_POSITION.value,
    "original position": FieldKey.ORIGINAL_POSITION.value,
    # HRBP
    "hrbp": FieldKey.HRBP.value,
    "hr business partner": FieldKey.HRBP.value,
    # Mobility type
    "tipo de movilidad": FieldKey.MOBILITY_TYPE.value,
    "tipo movilidad": FieldKey.MOBILITY_TYPE.value,
    "mobility type": FieldKey.MOBILITY_TYPE.value,
}

MOBILITY_TYPE_ALIASES: Dict[str, str] = {
    "inicio": MobilityType.START.value,
    "inicio de movilidad": MobilityType.START.value,
    "fin": MobilityType.END.value,
    "fin de movilidad": MobilityType.END.value,
    "periodo fijo": MobilityType.FIXED_PERIOD.value,
    "start": MobilityType.START.value,
    "end": MobilityType.END.value,
    "fixed-period": MobilityType.FIXED_PERIOD.value,
}

HRBP_OPTIONS: List[str] = [
    "Jesus Tejado",
    "Marta Mengual",
]

POSITION_OPTIONS: List[str] = [
    "Delivery Driver (Conductor)",
    "Sales Delivery Driver (Repartidor Preventa)",
    "Sales replenisher (Reponedor)",
    "Auto Sale Seller (Vendedor Autoventa)",
    "Pre Sale Seller (Vendedor Preventa)",
    "Sales Promoter ADR (ADR)",
    "Sales Technician DPV (DPV)",
    "Pre-Sale Representative B (Rutas Especializadas de Bebidas)",
    "Seller Replacement (Suplente)",
    "Sales Asst Operation (Asistente Operaciones Ventas Monitor)",
]
