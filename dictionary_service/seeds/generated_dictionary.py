# Code generated by dictionary-seeds-compile from dictionary_seed.json. DO NOT EDIT.
# dictionary_service/seeds/generated_dictionary.py
from __future__ import annotations

from typing import List

from dictionary_service.seeds.operations import Operation, OptionOp, SetOp

SEED_ID = "2025-10-30_real_estate_dictionary"
SEED_DESCRIPTION = "Load real estate dictionary (excluding geographic data)"
ALLOW_ROOT_FALLBACK = False
LOCALES = ["en", "es"]

# sets
SET_ESTATECATEGORY_EN = SetOp(name="estate_category", locale="en", label="Estate category", active=True)  # estate_category:en
SET_ESTATECATEGORY_ES = SetOp(name="estate_category", locale="es", label="Categoría de inmueble", active=True)  # estate_category:es
SET_ESTATETYPE_EN = SetOp(name="estate_type", locale="en", label="Estate type", active=True)  # estate_type:en
SET_ESTATETYPE_ES = SetOp(name="estate_type", locale="es", label="Tipo de inmueble", active=True)  # estate_type:es
SET_ESTATESUBTYPE_EN = SetOp(name="estate_subtype", locale="en", label="Estate subtype", active=True)  # estate_subtype:en
SET_ESTATESUBTYPE_ES = SetOp(name="estate_subtype", locale="es", label="Subtipo de inmueble", active=True)  # estate_subtype:es
SET_CONDITION_EN = SetOp(name="condition", locale="en", label="Condition", active=True)  # condition:en
SET_CONDITION_ES = SetOp(name="condition", locale="es", label="Estado", active=True)  # condition:es

# options without parents
OPT_1 = OptionOp(set_name="estate_category", key="residential", locale="en", label="Residential", value="residential", short_code="RES", order=1, active=True)  # estate_category:residential:en
OPT_2 = OptionOp(set_name="estate_category", key="residential", locale="es", label="Residencial", value="residential", short_code="RES", order=1, active=True)  # estate_category:residential:es
OPT_3 = OptionOp(set_name="estate_category", key="commercial", locale="en", label="Commercial", value="commercial", short_code="COM", order=2, active=True)  # estate_category:commercial:en
OPT_4 = OptionOp(set_name="estate_category", key="commercial", locale="es", label="Comercial", value="commercial", short_code="COM", order=2, active=True)  # estate_category:commercial:es
OPT_5 = OptionOp(set_name="estate_category", key="land", locale="en", label="Land", value="land", short_code="LND", order=3, active=True)  # estate_category:land:en
OPT_6 = OptionOp(set_name="estate_category", key="land", locale="es", label="Terreno", value="land", short_code="LND", order=3, active=True)  # estate_category:land:es
OPT_7 = OptionOp(set_name="condition", key="new", locale="en", label="New", value="new", short_code="NEW", order=1, active=True)  # condition:new:en
OPT_8 = OptionOp(set_name="condition", key="new", locale="es", label="A estrenar", value="new", short_code="NEW", order=1, active=True)  # condition:new:es
OPT_9 = OptionOp(set_name="condition", key="good", locale="en", label="Good", value="good", short_code="GOD", order=2, active=True)  # condition:good:en
OPT_10 = OptionOp(set_name="condition", key="good", locale="es", label="Buen estado", value="good", short_code="GOD", order=2, active=True)  # condition:good:es
OPT_11 = OptionOp(set_name="condition", key="to_renovate", locale="en", label="To renovate", value="to_renovate", short_code="REN", order=3, active=True)  # condition:to_renovate:en
OPT_12 = OptionOp(set_name="condition", key="to_renovate", locale="es", label="A reciclar", value="to_renovate", short_code="REN", order=3, active=True)  # condition:to_renovate:es

# options with parents
OPT_13 = OptionOp(set_name="estate_type", key="house", locale="en", label="House", value="house", short_code="HSE", order=1, active=True, parent_set="estate_category", parent_key="residential")  # estate_type:house:en -> estate_category:residential:en
OPT_14 = OptionOp(set_name="estate_type", key="house", locale="es", label="Casa", value="house", short_code="HSE", order=1, active=True, parent_set="estate_category", parent_key="residential")  # estate_type:house:es -> estate_category:residential:es
OPT_15 = OptionOp(set_name="estate_type", key="apartment", locale="en", label="Apartment", value="apartment", short_code="APT", order=2, active=True, parent_set="estate_category", parent_key="residential")  # estate_type:apartment:en -> estate_category:residential:en
OPT_16 = OptionOp(set_name="estate_type", key="apartment", locale="es", label="Departamento", value="apartment", short_code="APT", order=2, active=True, parent_set="estate_category", parent_key="residential")  # estate_type:apartment:es -> estate_category:residential:es
OPT_17 = OptionOp(set_name="estate_type", key="office", locale="en", label="Office", value="office", short_code="OFF", order=3, active=True, parent_set="estate_category", parent_key="commercial")  # estate_type:office:en -> estate_category:commercial:en
OPT_18 = OptionOp(set_name="estate_type", key="office", locale="es", label="Oficina", value="office", short_code="OFF", order=3, active=True, parent_set="estate_category", parent_key="commercial")  # estate_type:office:es -> estate_category:commercial:es
OPT_19 = OptionOp(set_name="estate_type", key="retail", locale="en", label="Retail space", value="retail", short_code="RTL", order=4, active=True, parent_set="estate_category", parent_key="commercial")  # estate_type:retail:en -> estate_category:commercial:en
OPT_20 = OptionOp(set_name="estate_type", key="retail", locale="es", label="Local comercial", value="retail", short_code="RTL", order=4, active=True, parent_set="estate_category", parent_key="commercial")  # estate_type:retail:es -> estate_category:commercial:es
OPT_21 = OptionOp(set_name="estate_type", key="plot", locale="en", label="Plot", value="plot", short_code="PLT", order=5, active=True, parent_set="estate_category", parent_key="land")  # estate_type:plot:en -> estate_category:land:en
OPT_22 = OptionOp(set_name="estate_type", key="plot", locale="es", label="Lote", value="plot", short_code="PLT", order=5, active=True, parent_set="estate_category", parent_key="land")  # estate_type:plot:es -> estate_category:land:es
OPT_23 = OptionOp(set_name="estate_subtype", key="detached", locale="en", label="Detached house", value="detached", short_code="DET", order=1, active=True, parent_set="estate_type", parent_key="house")  # estate_subtype:detached:en -> estate_type:house:en
OPT_24 = OptionOp(set_name="estate_subtype", key="detached", locale="es", label="Casa aislada", value="detached", short_code="DET", order=1, active=True, parent_set="estate_type", parent_key="house")  # estate_subtype:detached:es -> estate_type:house:es
OPT_25 = OptionOp(set_name="estate_subtype", key="semi_detached", locale="en", label="Semi-detached house", value="semi_detached", short_code="SDT", order=2, active=True, parent_set="estate_type", parent_key="house")  # estate_subtype:semi_detached:en -> estate_type:house:en
OPT_26 = OptionOp(set_name="estate_subtype", key="semi_detached", locale="es", label="Casa pareada", value="semi_detached", short_code="SDT", order=2, active=True, parent_set="estate_type", parent_key="house")  # estate_subtype:semi_detached:es -> estate_type:house:es
OPT_27 = OptionOp(set_name="estate_subtype", key="studio", locale="en", label="Studio", value="studio", short_code="STU", order=3, active=True, parent_set="estate_type", parent_key="apartment")  # estate_subtype:studio:en -> estate_type:apartment:en
OPT_28 = OptionOp(set_name="estate_subtype", key="studio", locale="es", label="Monoambiente", value="studio", short_code="STU", order=3, active=True, parent_set="estate_type", parent_key="apartment")  # estate_subtype:studio:es -> estate_type:apartment:es
OPT_29 = OptionOp(set_name="estate_subtype", key="penthouse", locale="en", label="Penthouse", value="penthouse", short_code="PTH", order=4, active=True, parent_set="estate_type", parent_key="apartment")  # estate_subtype:penthouse:en -> estate_type:apartment:en
OPT_30 = OptionOp(set_name="estate_subtype", key="penthouse", locale="es", label="Ático", value="penthouse", short_code="PTH", order=4, active=True, parent_set="estate_type", parent_key="apartment")  # estate_subtype:penthouse:es -> estate_type:apartment:es
OPT_31 = OptionOp(set_name="estate_subtype", key="coworking", locale="en", label="Coworking", value="coworking", short_code="CWK", order=5, active=True, parent_set="estate_type", parent_key="office")  # estate_subtype:coworking:en -> estate_type:office:en
OPT_32 = OptionOp(set_name="estate_subtype", key="coworking", locale="es", label="Cowork", value="coworking", short_code="CWK", order=5, active=True, parent_set="estate_type", parent_key="office")  # estate_subtype:coworking:es -> estate_type:office:es

OPERATIONS: List[Operation] = [
    SET_ESTATECATEGORY_EN,
    SET_ESTATECATEGORY_ES,
    SET_ESTATETYPE_EN,
    SET_ESTATETYPE_ES,
    SET_ESTATESUBTYPE_EN,
    SET_ESTATESUBTYPE_ES,
    SET_CONDITION_EN,
    SET_CONDITION_ES,
    OPT_1,
    OPT_2,
    OPT_3,
    OPT_4,
    OPT_5,
    OPT_6,
    OPT_7,
    OPT_8,
    OPT_9,
    OPT_10,
    OPT_11,
    OPT_12,
    OPT_13,
    OPT_14,
    OPT_15,
    OPT_16,
    OPT_17,
    OPT_18,
    OPT_19,
    OPT_20,
    OPT_21,
    OPT_22,
    OPT_23,
    OPT_24,
    OPT_25,
    OPT_26,
    OPT_27,
    OPT_28,
    OPT_29,
    OPT_30,
    OPT_31,
    OPT_32,
]
