"""FastAPI server exposing label composition and rendering."""

import logging
import os
from typing import Any, Dict, List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from label_creator.composition.aggregator import IngredientAggregator
from label_creator.composition.label_builder import LabelBuilder, PresetBuilder
from label_creator.data_layer.business_profile import BusinessProfileLoader
from label_creator.data_layer.exceptions import LabelValidationError, PresetNotFoundError
from label_creator.data_layer.models import BusinessInfo, Label
from label_creator.data_layer.preset_db import PresetDB
from label_creator.ingestion.label_validator import LabelForm, PresetForm
from label_creator.output.formatters import format_aggregation_json, format_rendered_json
from label_creator.output.label_renderer import render


logger = logging.getLogger(__name__)

presets_path = os.environ.get("LABEL_CREATOR_PRESETS", "data/presets/default_presets.json")
business_path = os.environ.get("LABEL_CREATOR_BUSINESS", "config/business.yaml")

app = FastAPI(title="Label Creator API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Local development
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ComposeRequest(BaseModel):
    selectedPresetIds: List[str] = Field(default_factory=list)
    additionalIngredientsText: str = ""


class LabelRequest(BaseModel):
    name: str
    creationMode: str = "manual"
    text: str = ""
    selectedPresetIds: List[str] = Field(default_factory=list)
    additionalIngredientsText: str = ""
    netQuantity: str = ""
    netQuantityUnit: str = "oz"
    allergens: List[str] = Field(default_factory=list)
    allergenDetails: str = ""
    includeCottageDisclaimer: bool = False


class BusinessRequest(BaseModel):
    businessName: str = ""
    businessAddress: str = ""
    businessCity: str = ""
    businessState: str = ""
    businessZip: str = ""
    businessPhone: str = ""


class BuildRequest(BaseModel):
    label: LabelRequest
    business: Optional[BusinessRequest] = None


class PresetRequest(BaseModel):
    name: str
    ingredientsText: str = ""
    brandName: str = ""


def _load_business(request: Optional[BusinessRequest]) -> BusinessInfo:
    if request is not None:
        return BusinessInfo.from_dict(request.model_dump())
    if os.path.exists(business_path):
        return BusinessProfileLoader(business_path).load()
    logger.debug("No business profile at %s, using empty profile", business_path)
    return BusinessInfo.empty()


def _to_form(request: LabelRequest) -> LabelForm:
    return LabelForm(
        name=request.name,
        creation_mode=request.creationMode,
        text=request.text,
        selected_preset_ids=request.selectedPresetIds,
        additional_ingredients_text=request.additionalIngredientsText,
        net_quantity=request.netQuantity,
        net_quantity_unit=request.netQuantityUnit,
        allergens=request.allergens,
        allergen_details=request.allergenDetails,
        include_cottage_disclaimer=request.includeCottageDisclaimer,
    )


@app.get("/api/presets")
def list_presets() -> List[Dict[str, Any]]:
    try:
        preset_db = PresetDB(presets_path)
        return [p.to_dict() for p in preset_db.get_all_presets()]
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@app.get("/api/presets/search")
def search_presets(q: str = "") -> List[Dict[str, Any]]:
    try:
        preset_db = PresetDB(presets_path)
        return [p.to_dict() for p in preset_db.search(q)]
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@app.get("/api/presets/{preset_id}")
def get_preset(preset_id: str) -> Dict[str, Any]:
    try:
        preset_db = PresetDB(presets_path)
        return preset_db.get_preset(preset_id).to_dict()
    except PresetNotFoundError as exc:
        raise HTTPException(status_code=404, detail=exc.to_dict()) from exc
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@app.post("/api/presets/build")
def build_preset(request: PresetRequest) -> Dict[str, Any]:
    try:
        preset = PresetBuilder().build(
            PresetForm(
                name=request.name,
                ingredients_text=request.ingredientsText,
                brand_name=request.brandName,
            )
        )
        return preset.to_dict()
    except LabelValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.to_dict()) from exc
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@app.post("/api/labels/compose")
def compose_ingredients(request: ComposeRequest) -> Dict[str, Any]:
    try:
        preset_db = PresetDB(presets_path)
        result = IngredientAggregator.aggregate_by_ids(
            request.selectedPresetIds,
            preset_db.get_all_presets(),
            request.additionalIngredientsText,
        )
        return format_aggregation_json(result)
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@app.post("/api/labels/build")
def build_label(request: BuildRequest) -> Dict[str, Any]:
    try:
        preset_db = PresetDB(presets_path)
        label = LabelBuilder().build(
            _to_form(request.label),
            preset_db.get_all_presets(),
            _load_business(request.business),
        )
        if not label.business_info().is_complete():
            logger.info("Built label %r with incomplete business information", label.name)
        return format_rendered_json(label, render(label))
    except LabelValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.to_dict()) from exc
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@app.post("/api/labels/render")
def render_label(record: Dict[str, Any]) -> Dict[str, Any]:
    try:
        label = Label.from_dict(record)
        return format_rendered_json(label, render(label))
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


if __name__ == "__main__":
    uvicorn.run(app, host="127.0.0.1", port=int(os.environ.get("PORT", "3000")))
