from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession
from app.database import get_db
from app.schemas import PostDTO, UserDTO
from app.services import user_service

router = APIRouter(prefix="/users", tags=["users"])

@router.get("", response_model=list[UserDTO])
async def list_users(db: AsyncSession = Depends(get_db)):
    users = await user_service.find_all(db)
    return [UserDTO.model_validate(u) for u in users]

@router.get("/{user_id}", response_model=UserDTO)
async def find_user(user_id: str, db: AsyncSession = Depends(get_db)):
    return UserDTO.model_validate(await user_service.find_by_id(db, user_id))

@router.get("/{user_id}/posts", response_model=list[PostDTO])
async def find_user_posts(user_id: str, db: AsyncSession = Depends(get_db)):
    posts = await user_service.find_posts(db, user_id)
    return [PostDTO.model_validate(p) for p in posts]

@router.post("", status_code=201)
async def insert_user(data: UserDTO, request: Request, db: AsyncSession = Depends(get_db)):
    user = await user_service.insert(db, user_service.from_dto(data))
    location = request.url_for("find_user", user_id=user.id)
    return Response(status_code=201, headers={"Location": str(location)})

@router.put("/{user_id}", status_code=204)
async def update_user(user_id: str, data: UserDTO, db: AsyncSession = Depends(get_db)):
    user = user_service.from_dto(data)
    user.id = user_id
    await user_service.update(db, user_id, user)
    return Response(status_code=204)

@router.delete("/{user_id}", status_code=204)
async def delete_user(user_id: str, db: AsyncSession = Depends(get_db)):
    await user_service.delete(db, user_id)
    return Response(status_code=204)
