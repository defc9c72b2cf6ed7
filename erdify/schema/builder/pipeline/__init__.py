from .extract_tables import extract_tables
from .reconcile_alter_tables import reconcile_alter_tables
from .infer_relationships_from_names import infer_relationships_from_names
