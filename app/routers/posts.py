from fastapi import APIRouter, Depends, Query, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession
from app.database import get_db
from app.schemas import CommentCreate, CommentDTO, PostDTO
from app.services import comment_service, post_service

router = APIRouter(prefix="/posts", tags=["posts"])

@router.get("", response_model=list[PostDTO])
async def list_posts(db: AsyncSession = Depends(get_db)):
    posts = await post_service.find_all(db)
    return [PostDTO.model_validate(p) for p in posts]

# Declared before /{post_id} so "titlesearch" is not taken for an id.
@router.get("/titlesearch", response_model=list[PostDTO])
async def find_by_title(
    text: str = Query("", description="Case-insensitive fragment of the title."),
    db: AsyncSession = Depends(get_db),
):
    posts = await post_service.search_title(db, text)
    return [PostDTO.model_validate(p) for p in posts]

@router.get("/{post_id}", response_model=PostDTO)
async def find_post(post_id: str, db: AsyncSession = Depends(get_db)):
    return PostDTO.model_validate(await post_service.find_by_id(db, post_id))

@router.post("", status_code=201)
async def insert_post(data: PostDTO, request: Request, db: AsyncSession = Depends(get_db)):
    post = await post_service.insert(db, post_service.from_dto(data))
    location = request.url_for("find_post", post_id=post.id)
    return Response(status_code=201, headers={"Location": str(location)})

@router.put("/{post_id}", status_code=204)
async def update_post(post_id: str, data: PostDTO, db: AsyncSession = Depends(get_db)):
    post = post_service.from_dto(data)
    post.id = post_id
    await post_service.update(db, post_id, post)
    return Response(status_code=204)

@router.delete("/{post_id}", status_code=204)
async def delete_post(post_id: str, db: AsyncSession = Depends(get_db)):
    await post_service.delete(db, post_id)
    return Response(status_code=204)

@router.post("/{post_id}/comments", status_code=201, response_model=CommentDTO)
async def add_comment(post_id: str, data: CommentCreate, db: AsyncSession = Depends(get_db)):
    return await comment_service.add_comment(db, post_id, data)
