# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from blogapi.application.services.token_service import TokenService
from blogapi.application.use_cases.posts.create_post import CreatePostUseCase
from blogapi.application.use_cases.posts.delete_post import DeletePostUseCase
from blogapi.application.use_cases.posts.get_post import GetPostUseCase
from blogapi.application.use_cases.posts.list_posts import ListPostsUseCase
from blogapi.application.use_cases.posts.update_post import UpdatePostUseCase
from blogapi.interfaces.http.dto.posts import PostResponseDTO
from blogapi.interfaces.http.request_context import (
    authenticate,
    json_body,
    parse_identifier,
)
from blogapi.shared.logging import logger


class PostsController:
    def __init__(
        self,
        *,
        tokens: TokenService,
        create_post: CreatePostUseCase,
        list_posts: ListPostsUseCase,
        get_post: GetPostUseCase,
        update_post: UpdatePostUseCase,
        delete_post: DeletePostUseCase,
    ) -> None:
        self._tokens = tokens
        self._create_post = create_post
        self._list_posts = list_posts
        self._get_post = get_post
        self._update_post = update_post
        self._delete_post = delete_post

    def create(self) -> tuple[Response, int]:
        caller_id = authenticate(self._tokens)
        post = self._create_post.execute(caller_id, json_body())
        response = jsonify(PostResponseDTO.render(post))
        response.headers["Location"] = f"/posts/{post.id}"
        logger.info(f"posts.create: ok (user_id={caller_id}, post_id={post.id})")
        return response, 201

    def list_posts(self) -> tuple[Response, int]:
        posts = self._list_posts.execute()
        logger.info(f"posts.list: ok (n={len(posts)})")
        return jsonify([PostResponseDTO.render(post) for post in posts]), 200

    def get(self, post_id: str) -> tuple[Response, int]:
        post = self._get_post.execute(parse_identifier(post_id))
        return jsonify(PostResponseDTO.render(post)), 200

    def update(self, post_id: str) -> tuple[Response, int]:
        target_id = parse_identifier(post_id)
        caller_id = authenticate(self._tokens)
        post = self._update_post.execute(caller_id, target_id, json_body())
        logger.info(f"posts.update: ok (user_id={caller_id}, post_id={target_id})")
        return jsonify(PostResponseDTO.render(post)), 200

    def delete(self, post_id: str) -> Response:
        target_id = parse_identifier(post_id)
        caller_id = authenticate(self._tokens)
        self._delete_post.execute(caller_id, target_id)
        logger.info(f"posts.delete: ok (user_id={caller_id}, post_id={target_id})")
        response = Response(status=204)
        response.headers["Entity"] = str(target_id)
        return response

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("posts", __name__)
        bp.add_url_rule("/posts", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/posts", view_func=self.list_posts, methods=["GET"])
        bp.add_url_rule("/posts/<post_id>", view_func=self.get, methods=["GET"])
        bp.add_url_rule("/posts/<post_id>", view_func=self.update, methods=["PUT", "POST"])
        bp.add_url_rule("/posts/<post_id>", view_func=self.delete, methods=["DELETE"])
        return bp
