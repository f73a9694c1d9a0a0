from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from chirpy.core.db import get_db
from chirpy.core.exceptions import InvalidArgumentError, NotFoundError
from chirpy.db.database import Database
from chirpy.domains.chirps.schemas import ChirpCreate, ChirpResponse, ChirpValidateResponse
from chirpy.domains.chirps.services import ChirpService

router = APIRouter(prefix="/api", tags=["chirps"])


@router.post("/validate_chirp", response_model=ChirpValidateResponse)
def validate_chirp(chirp_data: ChirpCreate):
    """Проверка chirp'а без сохранения"""
    try:
        cleaned_body = ChirpService.validate_chirp(chirp_data.body)
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    
    return ChirpValidateResponse(cleaned_body=cleaned_body)


@router.post("/chirps", response_model=ChirpResponse, status_code=status.HTTP_201_CREATED)
def create_chirp(
    chirp_data: ChirpCreate,
    db: Database = Depends(get_db)
):
    """Создание нового chirp'а"""
    chirp_service = ChirpService(db)
    
    try:
        chirp = chirp_service.create_chirp(chirp_data.body)
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    
    return ChirpResponse.model_validate(chirp)


@router.get("/chirps", response_model=List[ChirpResponse])
def get_chirps(db: Database = Depends(get_db)):
    """Получение всех chirp'ов"""
    chirp_service = ChirpService(db)
    
    return [ChirpResponse.model_validate(chirp) for chirp in chirp_service.list_chirps()]


@router.get("/chirps/{chirp_id}", response_model=ChirpResponse)
def get_chirp(
    chirp_id: str,
    db: Database = Depends(get_db)
):
    """Получение chirp'а по id"""
    chirp_service = ChirpService(db)
    
    try:
        chirp = chirp_service.get_chirp(chirp_id)
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Chirp not found"
        )
    
    return ChirpResponse.model_validate(chirp)
