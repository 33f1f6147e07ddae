"""Research-paper stopword table used to filter noise terms."""

from __future__ import annotations

from typing import Iterable

# Generic AI/ML vocabulary, boilerplate research phrasing and common English
# function words. Entries containing spaces or hyphens never match a single
# token but are kept so phrase-level callers can reuse the table.
AI_STOPWORDS: frozenset[str] = frozenset({
    # AI/ML specific
    "ai", "artificial", "intelligence", "ml", "machine", "learning",
    "dl", "deep", "neural", "network", "networks", "layer", "layers",
    "model", "models", "pretrained", "pretraining", "fine-tune", "finetune", "finetuning",
    "training", "trained", "train", "test", "testing", "validation", "cross-validation",
    "algorithm", "algorithms", "method", "methods", "approach", "approaches",
    "baseline", "baselines", "state-of-the-art", "sota",
    "parameter", "parameters", "hyperparameter", "hyperparameters",
    "weight", "weights", "bias", "biases", "gradient", "gradients",
    "loss", "losses", "objective", "function", "functions", "activation", "relu", "sigmoid", "softmax",
    "dropout", "batchnorm", "normalization", "regularization",
    "optimizer", "optimizers", "optimization", "sgd", "adam",
    "supervised", "unsupervised", "semi-supervised", "self-supervised",
    "classification", "regression", "clustering", "segmentation", "detection",
    "prediction", "predict", "predictive", "inference", "infer", "inferencing",
    "embedding", "embeddings", "vector", "vectors", "dimension", "dimensions",
    "feature", "features", "representation", "representations",
    "transformer", "transformers", "attention", "self-attention", "positional",
    "llm", "llms", "large", "language",
    "pretrain", "prompt", "prompting", "instruction", "instruction-tuning",
    "nlp", "natural", "processing", "text", "token", "tokens", "tokenization", "vocab",
    "linguistic", "semantic", "syntax", "parsing", "generation",
    "cv", "computer", "vision", "image", "images", "object", "objects",
    "recognition", "augmentation", "preprocessing",
    "rl", "reinforcement", "reward", "agent", "agents", "environment", "policy", "policies",
    "decision", "decisions", "decision-making", "exploration", "exploitation",
    "value", "q-value", "advantage", "trajectory",
    "graph", "graphs", "gnn", "gcn", "node", "nodes", "edge", "edges",
    "generative", "gan", "gans", "vae", "diffusion", "sampling", "decoder", "encoder",
    "autoencoder", "autoregressive", "decoder-only", "seq2seq",
    "framework", "frameworks", "library", "libraries", "pytorch", "tensorflow", "jax", "huggingface",
    "benchmark", "benchmarks", "dataset", "datasets", "split", "label", "labels",
    "metric", "metrics", "accuracy", "precision", "recall", "f1", "auc",
    "overfitting", "underfitting", "generalization", "variance",
    "scalable", "scalability", "efficient", "efficiency", "performance", "speedup",
    "compute", "computational", "latency", "throughput",
    "hardware", "gpu", "gpus", "tpu", "cpu", "memory", "storage", "infrastructure",

    # Common research paper terms
    "which", "based", "making", "using", "used",
    "technique", "techniques", "system", "systems",
    "architecture", "architectures",
    "design", "designed", "develop", "developed", "development", "build", "built",
    "propose", "proposed", "introduce", "introduced", "novel", "new",
    "paper", "research", "study", "studies", "work", "works", "literature",
    "implement", "implementation", "perform", "result", "results",
    "evaluate", "evaluation", "measure", "measurement",
    "analysis", "analyze", "analyses", "present", "presents", "presented",
    "show", "shows", "shown", "demonstrate", "demonstrates", "demonstrated",
    "experiment", "experiments", "experimental",
    "data", "information", "knowledge",
    "task", "tasks", "problem", "problems", "issue", "issues",
    "solution", "solutions", "solve", "solving",
    "application", "applications", "applied", "usage", "utilize", "utilized",
    "field", "fields", "area", "areas", "domain", "domains",
    "current", "existing", "previous", "prior", "recent", "traditional", "conventional",
    "following", "different", "various", "several", "multiple", "numerous",
    "significant", "important", "notable", "key", "major",
    "challenge", "challenges", "limitation", "limitations",
    "future", "direction", "directions", "perspective", "perspectives",
    "compare", "compared", "comparison", "comparative",
    "advantages", "benefit", "benefits", "drawback", "drawbacks",
    "potential", "effectiveness", "robust", "robustness",
    "contribution", "contributions", "insight", "insights",
    "goal", "aim", "target", "motivation",
    "theoretical", "practical", "empirical", "qualitative", "quantitative",
    "setting", "scenario", "context",
    "tool", "tools", "resource", "resources", "platform", "platforms",
    "case", "cases", "case study", "case studies",

    # Common English stopwords
    "a", "an", "the", "and", "but", "or", "nor", "so", "because",
    "if", "then", "else", "this", "that", "these", "those",
    "am", "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did", "doing",
    "will", "would", "shall", "should", "can", "could", "may", "might", "must",
    "i", "you", "he", "she", "it", "we", "they", "me", "him", "her", "us", "them",
    "my", "your", "his", "its", "our", "their",
    "mine", "yours", "hers", "ours", "theirs",
    "who", "whom", "whose", "what", "where", "when", "why", "how",
    "not", "no", "yes", "yet", "also", "just", "very", "too", "quite",
    "than", "there", "here", "out", "in", "on", "at", "by", "of", "to", "from", "up", "down",
    "with", "without", "about", "into", "onto", "off", "over", "under", "again",
    "once", "all", "any", "both", "each", "few", "many", "some", "such",
    "only", "own", "same", "other", "another", "more", "most", "less", "least",
    "every", "much",
    "although", "though", "while", "whereas",
    "before", "after", "during", "until", "since",
    "unless", "whether",
    "even", "ever", "never", "always", "already", "still",
    "get", "got", "gets", "getting", "make", "makes", "made",
    "say", "says", "said", "go", "goes", "went", "gone",
    "see", "seen", "look", "looked", "looking",
    "come", "came", "coming", "take", "took", "taken",
    "know", "knew", "known", "think", "thought", "high", "state", "however", "real", "cost",
})


def merge_stopwords(custom: Iterable[str] = ()) -> frozenset[str]:
    """Return the default table united with lower-cased caller additions.

    A fresh set is built on every call; the default table is never mutated.
    """
    return AI_STOPWORDS | {word.lower() for word in custom}
