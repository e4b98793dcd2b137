#!/usr/bin/env python3
"""스페인어 발음 평가 엔진 CLI 인터페이스.

개발자가 목표 활용형과 인식 결과를 직접 넣어 평가 결과(JSON)를 확인하거나,
단어의 발음 안내를 출력하는 도구입니다. 음성 재생은 지원하지 않습니다.
"""

import sys
import json
import argparse
import logging
from typing import List, Optional
from pathlib import Path

# 환경변수 로딩 (.env.local 파일 지원)
from dotenv import load_dotenv

from .core.analysis_config import AnalysisConfig
from .models.assessment import AssessmentContext
from .analyzers.pronunciation.assessment_types import SemanticClassification, SemanticType
from .analyzers.pronunciation.breakdown import PhoneticsBreakdownBuilder
from .analyzers.pronunciation.pronunciation_analyzer import PronunciationAnalyzer
from .utils.logging_config import configure_logging
from .utils.pronunciation_guide import (
    generate_ipa,
    generate_pronunciation_guide,
    generate_pronunciation_tip,
)


def load_environment_variables(base_dir: Optional[Path] = None) -> List[str]:
    """환경변수 파일들을 우선순위에 따라 로드 (.env.local > .env)."""
    base_dir = base_dir or Path.cwd()
    env_files = [
        base_dir / ".env.local",
        base_dir / ".env",
    ]

    loaded_files = []
    for env_file in env_files:
        if env_file.exists():
            load_dotenv(env_file, override=False)  # 기존 환경변수 보존
            loaded_files.append(str(env_file))

    if loaded_files:
        logging.getLogger(__name__).info(f"✅ 환경변수 파일 로드됨: {', '.join(loaded_files)}")

    return loaded_files


def create_argument_parser() -> argparse.ArgumentParser:
    """명령행 인수 파서 생성."""
    parser = argparse.ArgumentParser(
        prog='pronunciation-coach',
        description='🎯 스페인어 동사 활용형 발음 평가 도구',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
사용 예시:
  %(prog)s assess hablo hablo                                   # 가중 합산 평가
  %(prog)s assess comí comi --semantic-type accent_error --semantic-score 85
  %(prog)s assess hablo hablo --legacy                          # 완전 일치 95점 처리
  %(prog)s guide llave                                          # 발음 안내
        """
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='WARNING',
        help='로그 레벨 (기본값: WARNING)'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    assess = subparsers.add_parser('assess', help='목표 활용형과 인식 결과를 비교 평가')
    assess.add_argument('target', help='목표 활용형')
    assess.add_argument('recognized', help='음성 인식 결과')
    assess.add_argument('--confidence', type=float, metavar='F',
                        help='인식기 신뢰도 (0-1)')
    assess.add_argument('--timing-ms', type=float, metavar='N',
                        help='응답 지연 시간 (ms)')
    assess.add_argument('--lemma', help='동사 원형')
    assess.add_argument('--mood', help='서법 (예: indicative)')
    assess.add_argument('--tense', help='시제 (예: pres)')
    assess.add_argument('--person', help='인칭 (예: 1s)')
    assess.add_argument('--semantic-type', choices=[t.value for t in SemanticType],
                        help='외부 의미 검증 분류 유형')
    assess.add_argument('--semantic-score', type=float, metavar='N',
                        help='외부 의미 검증 점수 (0-100, --semantic-type과 함께 사용)')
    assess.add_argument('--legacy', action='store_true',
                        help='완전 일치를 95점으로 처리하는 레거시 방식')

    guide = subparsers.add_parser('guide', help='단어의 발음 안내 출력')
    guide.add_argument('word', help='대상 단어')

    return parser


def build_classification(args: argparse.Namespace) -> Optional[SemanticClassification]:
    """명령행 인수에서 의미 검증 결과 생성."""
    if args.semantic_type is None:
        if args.semantic_score is not None:
            raise ValueError("--semantic-score는 --semantic-type과 함께 사용해야 합니다")
        return None

    if args.semantic_score is None:
        raise ValueError("--semantic-type은 --semantic-score와 함께 사용해야 합니다")

    return SemanticClassification(
        type=SemanticType(args.semantic_type),
        pedagogical_score=args.semantic_score,
    )


def run_assess(args: argparse.Namespace) -> dict:
    """assess 명령 실행."""
    config = AnalysisConfig.from_env()
    if args.legacy:
        config.update(strict_exact_match=False)

    context = AssessmentContext.from_dict(
        {
            'lemma': args.lemma,
            'mood': args.mood,
            'tense': args.tense,
            'person': args.person,
            'confidence': args.confidence,
            'timing_ms': args.timing_ms,
        },
        default_confidence=config.default_confidence,
        default_timing_ms=config.default_timing_ms,
    )

    analyzer = PronunciationAnalyzer(config=config)
    return analyzer.analyze_pronunciation(
        args.target, args.recognized, context, build_classification(args)
    )


def run_guide(args: argparse.Namespace) -> dict:
    """guide 명령 실행."""
    return {
        'word': args.word,
        'guide': generate_pronunciation_guide(args.word),
        'ipa': generate_ipa(args.word),
        'tip': generate_pronunciation_tip(args.word),
        'breakdown': PhoneticsBreakdownBuilder().build(args.word).to_dict(),
    }


def main(argv: Optional[List[str]] = None) -> None:
    """메인 함수."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(log_level=args.log_level, force_reconfigure=True)

        # 설정을 만들기 전에 환경변수 파일을 먼저 로드
        load_environment_variables()

        if args.command == 'assess':
            output = run_assess(args)
        else:
            output = run_guide(args)

        print(json.dumps(output, ensure_ascii=False, indent=2))

    except KeyboardInterrupt:
        print("\n⚠️  사용자에 의해 중단되었습니다.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"❌ 실행 중 오류가 발생했습니다: {str(e)}", file=sys.stderr)
        logging.exception("CLI 실행 중 예외 발생")
        sys.exit(1)


if __name__ == "__main__":
    main()
